"""Regional unit profiles and epoch time formatting."""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone, tzinfo
from types import MappingProxyType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UnitProfile:
    """Location specific terms for weather data.

    ``long_date`` and ``hour`` are strftime patterns. ``%P`` is a
    lowercase am/pm marker.
    """

    degrees: str = ""
    speed: str = ""
    length: str = ""
    precipitation: str = ""
    long_date: str = ""
    hour: str = ""


EMPTY_PROFILE = UnitProfile()

# Region code -> UnitProfile
UNIT_FORMATS: MappingProxyType[str, UnitProfile] = MappingProxyType(
    {
        "us": UnitProfile(
            degrees="°F",
            speed="mph",
            length="miles",
            precipitation="in/hr",
            long_date="%B %-d at %-I:%M%P %Z",
            hour="%-I:%M%P %Z",
        ),
        # "EET" is literal text here, not the local zone
        "si": UnitProfile(
            degrees="°C",
            speed="m/s",
            length="kilometers",
            precipitation="mm/h",
            long_date="%Y-%m-%d %H:%M:%S EET",
            hour="%H:%M EET",
        ),
        "ca": UnitProfile(
            degrees="°C",
            speed="km/h",
            length="kilometers",
            precipitation="mm/h",
            long_date="%B %-d at %-I:%M%P %Z",
            hour="%-I:%M%P %Z",
        ),
        # Deprecated, use "uk2" instead
        "uk": UnitProfile(
            degrees="°C",
            speed="mph",
            length="kilometers",
            precipitation="mm/h",
            long_date="%B %-d at %H:%M %Z",
            hour="%H:%M %Z",
        ),
        "uk2": UnitProfile(
            degrees="°C",
            speed="mph",
            length="miles",
            precipitation="mm/h",
            long_date="%B %-d at %H:%M %Z",
            hour="%H:%M %Z",
        ),
    }
)

DATE_FORMAT = "%B %-d (%A)"


def lookup(region: str) -> UnitProfile:
    """Get the unit profile for a region, or the empty profile if unknown."""
    profile = UNIT_FORMATS.get(region)
    if profile is None:
        logger.debug("No unit profile for region %r, units will be blank", region)
        return EMPTY_PROFILE
    return profile


# =============================================================================
# Time formatting
# =============================================================================


def _to_datetime(seconds: int, tz: tzinfo | None) -> datetime:
    # astimezone(None) converts to the system's local zone
    return datetime.fromtimestamp(seconds, tz=timezone.utc).astimezone(tz)


def _strftime(moment: datetime, pattern: str) -> str:
    if not pattern:
        return ""
    if "%P" in pattern:
        pattern = pattern.replace("%P", moment.strftime("%p").lower())
    return moment.strftime(pattern)


def format_epoch(seconds: int, units: UnitProfile, tz: tzinfo | None = None) -> str:
    """Format an epoch timestamp as a long date and time."""
    return _strftime(_to_datetime(seconds, tz), units.long_date)


def format_epoch_date(seconds: int, tz: tzinfo | None = None) -> str:
    """Format an epoch timestamp as e.g. ``January 2 (Monday)``."""
    return _strftime(_to_datetime(seconds, tz), DATE_FORMAT)


def format_epoch_time(
    seconds: int, units: UnitProfile, tz: tzinfo | None = None
) -> str:
    """Format an epoch timestamp as a time of day."""
    return _strftime(_to_datetime(seconds, tz), units.hour)
