"""Pretty printing of current and daily forecasts."""

import logging
import math
from datetime import tzinfo
from decimal import Decimal

from rich.console import Console
from rich.markup import escape

from icons import lookup_icon
from models import Forecast, Location, WeatherSample
from units import UnitProfile, format_epoch, format_epoch_date, format_epoch_time, lookup

logger = logging.getLogger(__name__)

console = Console(highlight=False, emoji=False, soft_wrap=True)

# All the combinations of N, S, E, W
DIRECTIONS = (
    "N",
    "NNE",
    "NE",
    "ENE",
    "E",
    "ESE",
    "SE",
    "SSE",
    "S",
    "SSW",
    "SW",
    "WSW",
    "W",
    "WNW",
    "NW",
    "NNW",
)


def bearing_label(degrees: float) -> str:
    """Convert a bearing in degrees to a 16-point compass direction."""
    if not math.isfinite(degrees):
        return DIRECTIONS[0]
    idx = int(math.fmod((degrees + 11.25) / 22.5, 16))
    return DIRECTIONS[idx]


def format_number(value: float) -> str:
    """Format a number with the shortest digits that round-trip.

    Whole numbers drop the fraction (``25.0`` -> ``25``). Exponents below -4
    or from 6 up switch to scientific notation, e.g. ``1e+06``.
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value == 0:
        return "0"

    number = Decimal(repr(value))
    exp = number.adjusted()
    if -4 <= exp < 6:
        return format(number.normalize(), "f")

    sign, digits, _ = number.normalize().as_tuple()
    mantissa = str(digits[0])
    if len(digits) > 1:
        mantissa += "." + "".join(str(d) for d in digits[1:])
    return f"{'-' if sign else ''}{mantissa}e{exp:+03d}"


def colorize(color: str, text: str) -> str:
    """Wrap text in rich markup for the given color."""
    return f"[{color}]{escape(text)}[/{color}]"


def resolve_icon(raw_key: str) -> str:
    """Get the colored glyph for a condition key."""
    glyph, color = lookup_icon(raw_key)
    return colorize(color, glyph)


# =============================================================================
# Metrics
# =============================================================================


def render_common(
    sample: WeatherSample, units: UnitProfile, out: Console | None = None
) -> None:
    """Print one line per reported metric of a sample."""
    if out is None:
        out = console

    if sample.humidity > 0:
        humidity = colorize("white", f"{format_number(sample.humidity * 100)}%")
        if sample.humidity > 0.20:
            out.print(f"  Ick! The humidity is {humidity}")
        else:
            out.print(f"  The humidity is {humidity}")

    if sample.precip_intensity > 0:
        intensity = colorize(
            "white",
            f"{format_number(sample.precip_intensity)} {units.precipitation}",
        )
        out.print(
            f"  The precipitation intensity of {colorize('white', sample.precip_type)} is {intensity}"
        )

    if sample.precip_probability > 0:
        probability = colorize(
            "white", f"{format_number(sample.precip_probability * 100)}%"
        )
        out.print(f"  The precipitation probability is {probability}")

    if sample.nearest_storm_distance > 0:
        distance = colorize(
            "white",
            f"{format_number(sample.nearest_storm_distance)} {units.length} "
            f"{bearing_label(sample.nearest_storm_bearing)}",
        )
        out.print(f"  The nearest storm is {distance} away")

    if sample.wind_speed > 0:
        wind = colorize(
            "white",
            f"{format_number(sample.wind_speed)} {units.speed} "
            f"{bearing_label(sample.wind_bearing)}",
        )
        out.print(f"  The wind speed is {wind}")

    if sample.cloud_cover > 0:
        cloud_cover = colorize("white", f"{format_number(sample.cloud_cover * 100)}%")
        out.print(f"  The cloud coverage is {cloud_cover}")

    # Visibility is capped at 10, anything at the cap is unlimited
    if sample.visibility < 10:
        visibility = colorize(
            "white", f"{format_number(sample.visibility)} {units.length}"
        )
        out.print(f"  The visibility is {visibility}")

    if sample.pressure > 0:
        pressure = colorize("white", f"{format_number(sample.pressure)} mbar")
        out.print(f"  The pressure is {pressure}")
        out.print()


# =============================================================================
# Printers
# =============================================================================


def print_current(
    forecast: Forecast,
    location: Location,
    ignore_alerts: bool = False,
    hide_icon: bool = False,
    out: Console | None = None,
    tz: tzinfo | None = None,
) -> None:
    """Pretty print the current conditions, alerts included."""
    if out is None:
        out = console
    units = lookup(forecast.units)
    current = forecast.currently

    if not hide_icon:
        out.print(resolve_icon(current.icon))

    place = colorize("green", f"{location.city} in {location.region}")
    out.print(
        f"\nCurrent weather is {colorize('cyan', current.summary)} in {place} "
        f"for {colorize('cyan', format_epoch(current.time, units, tz))}"
    )

    # Compared as rendered text, so values that print alike count as equal
    temp = colorize("magenta", f"{format_number(current.temperature)}{units.degrees}")
    feels_like = colorize(
        "magenta", f"{format_number(current.apparent_temperature)}{units.degrees}"
    )
    if temp == feels_like:
        out.print(f"The temperature is {temp}")
    else:
        out.print(f"The temperature is {temp}, but it feels like {feels_like}")
    out.print()

    if ignore_alerts:
        logger.debug("Skipping %d alert(s)", len(forecast.alerts))
    else:
        for alert in forecast.alerts:
            if not alert.title and not alert.description:
                continue
            if alert.title:
                out.print(colorize("red", alert.title))
            if alert.description:
                out.print(colorize("red", alert.description), end="")
            created = format_epoch(alert.time, units, tz)
            expires = format_epoch(alert.expires, units, tz)
            out.print("\t\t\t" + colorize("red", f"Created: {created}"))
            out.print("\t\t\t" + colorize("red", f"Expires: {expires}"))
            out.print()

    render_common(current, units, out=out)


def print_daily(
    forecast: Forecast,
    days: int,
    out: Console | None = None,
    tz: tzinfo | None = None,
) -> None:
    """Pretty print up to ``days`` days of the daily forecast.

    The first entry is today and is skipped, since the current conditions
    cover it. A non-positive ``days`` prints nothing.
    """
    if out is None:
        out = console
    units = lookup(forecast.units)

    for day in forecast.daily[1 : 1 + max(days, 0)]:
        out.print(colorize("magenta", format_epoch_date(day.time, tz)))

        temp_max = colorize("blue", f"{format_number(day.temperature_max)}{units.degrees}")
        temp_min = colorize("blue", f"{format_number(day.temperature_min)}{units.degrees}")
        feels_max = colorize(
            "cyan", f"{format_number(day.apparent_temperature_max)}{units.degrees}"
        )
        feels_min = colorize(
            "cyan", f"{format_number(day.apparent_temperature_min)}{units.degrees}"
        )
        out.print(
            f"The temperature high is {temp_max}, feels like {feels_max} "
            f"around {format_epoch_time(day.temperature_max_time, units, tz)},"
        )
        out.print(
            f"and low is {temp_min}, feels like {feels_min} "
            f"around {format_epoch_time(day.temperature_min_time, units, tz)}"
        )
        out.print()

        render_common(day, units, out=out)
