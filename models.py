"""Forecast data structures.

Numeric fields default to zero and strings to empty, so a metric the
provider left out reads the same as one reported as zero.
"""

import json
from dataclasses import dataclass, field, fields
from typing import IO, Any


class ForecastFormatError(ValueError):
    """Raised when a forecast document cannot be read."""


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def _convert(kind: type, value: Any) -> Any:
    # bool is an int subclass, but true/false is never a measurement
    if isinstance(value, bool):
        raise TypeError(f"expected {kind.__name__}, got {value!r}")
    if kind is str:
        if not isinstance(value, str):
            raise TypeError(f"expected text, got {value!r}")
        return value
    if isinstance(value, str):
        raise TypeError(f"expected a number, got {value!r}")
    return kind(value)


def _values_from(cls, data: dict[str, Any]) -> dict[str, Any]:
    """Pick the camelCase keys for ``cls``'s fields, converted to their types.

    Missing and null values are left to the field defaults. Raises
    ``TypeError`` for values that don't fit the field.
    """
    values = {}
    for f in fields(cls):
        value = data.get(_camel(f.name))
        if value is not None:
            try:
                values[f.name] = _convert(f.type, value)
            except (TypeError, ValueError, OverflowError) as e:
                raise TypeError(f"{_camel(f.name)}: {e}") from e
    return values


@dataclass
class WeatherSample:
    """Current conditions, or one day of the daily forecast."""

    time: int = 0
    summary: str = ""
    icon: str = ""

    temperature: float = 0
    apparent_temperature: float = 0
    temperature_max: float = 0
    temperature_max_time: int = 0
    temperature_min: float = 0
    temperature_min_time: int = 0
    apparent_temperature_max: float = 0
    apparent_temperature_min: float = 0

    humidity: float = 0
    precip_intensity: float = 0
    precip_probability: float = 0
    precip_type: str = ""
    nearest_storm_distance: float = 0
    nearest_storm_bearing: float = 0
    wind_speed: float = 0
    wind_bearing: float = 0
    cloud_cover: float = 0
    visibility: float = 0
    pressure: float = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "WeatherSample":
        """Build a sample from camelCase provider keys, ignoring unknown ones."""
        return cls(**_values_from(cls, data))


@dataclass
class Alert:
    """A severe weather alert."""

    title: str = ""
    description: str = ""
    time: int = 0
    expires: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Alert":
        return cls(**_values_from(cls, data))


@dataclass
class Location:
    """Where the forecast is for."""

    city: str = ""
    region: str = ""


@dataclass
class Forecast:
    """A full forecast document.

    ``units`` is the region code selecting the unit profile. ``daily[0]``
    is today.
    """

    units: str = ""
    currently: WeatherSample = field(default_factory=WeatherSample)
    daily: list[WeatherSample] = field(default_factory=list)
    alerts: list[Alert] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any, default_units: str = "us") -> "Forecast":
        """Build a forecast from a parsed provider document."""
        if not isinstance(data, dict):
            raise ForecastFormatError("Forecast document must be a JSON object")

        try:
            flags = data.get("flags") or {}
            daily = data.get("daily") or {}
            return cls(
                units=_convert(str, flags.get("units") or default_units),
                currently=WeatherSample.from_dict(data.get("currently") or {}),
                daily=[WeatherSample.from_dict(d) for d in daily.get("data") or []],
                alerts=[Alert.from_dict(a) for a in data.get("alerts") or []],
            )
        except (AttributeError, TypeError) as e:
            raise ForecastFormatError(f"Malformed forecast document: {e}") from e


def load_forecast(fp: IO[str], default_units: str = "us") -> Forecast:
    """Read a forecast from an open JSON file."""
    try:
        data = json.load(fp)
    except json.JSONDecodeError as e:
        raise ForecastFormatError(f"Invalid JSON: {e}") from e
    return Forecast.from_dict(data, default_units=default_units)
