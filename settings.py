"""Persistent settings management for weathertext."""

import json
import logging
from dataclasses import dataclass, asdict
from pathlib import Path

from models import Location
from units import UNIT_FORMATS

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".config" / "weathertext"
CONFIG_FILE = CONFIG_DIR / "config.json"

DEFAULT_UNITS = "us"
DEFAULT_DAYS = 3


@dataclass
class Settings:
    """User settings for weathertext."""

    # Default location label (documents carry coordinates only)
    city: str | None = None
    region: str | None = None

    # Region code used when a document doesn't declare one
    units: str = DEFAULT_UNITS

    # Output
    days: int = DEFAULT_DAYS
    hide_icon: bool = False
    ignore_alerts: bool = False

    def save(self) -> None:
        """Save settings to config file."""
        CONFIG_DIR.mkdir(parents=True, exist_ok=True)
        data = asdict(self)
        CONFIG_FILE.write_text(json.dumps(data, indent=2))

    @classmethod
    def load(cls) -> "Settings":
        """Load settings from config file, or return defaults."""
        if not CONFIG_FILE.exists():
            return cls()

        try:
            data = json.loads(CONFIG_FILE.read_text())
            return cls(
                city=data.get("city"),
                region=data.get("region"),
                units=data.get("units", DEFAULT_UNITS),
                days=int(data.get("days", DEFAULT_DAYS)),
                hide_icon=bool(data.get("hide_icon", False)),
                ignore_alerts=bool(data.get("ignore_alerts", False)),
            )
        except (json.JSONDecodeError, AttributeError, TypeError, ValueError) as e:
            logger.warning("Ignoring unreadable config %s: %s", CONFIG_FILE, e)
            return cls()

    def resolve_location(
        self, city: str | None = None, region: str | None = None
    ) -> Location:
        """
        Resolve the location label, CLI values taking precedence.
        Missing parts come out as empty strings.
        """
        return Location(
            city=city if city is not None else self.city or "",
            region=region if region is not None else self.region or "",
        )


def validate_units(value: str) -> str:
    """Check a region code against the known unit profiles.

    Raises:
        ValueError: If the region code is not recognized.
    """
    if value not in UNIT_FORMATS:
        available = ", ".join(UNIT_FORMATS)
        raise ValueError(f"Unknown units '{value}'. Available units: {available}")
    return value


def validate_days(value: str) -> int:
    """Parse a day count, which must be a non-negative integer.

    Raises:
        ValueError: If the value is not a non-negative integer.
    """
    days = int(value)
    if days < 0:
        raise ValueError("days must be 0 or more")
    return days


def get_settings() -> Settings:
    """Get current settings."""
    return Settings.load()
