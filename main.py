import logging
from datetime import datetime

import click

from rich.table import Table
from rich import box

from models import Forecast, ForecastFormatError, load_forecast
from render import console, print_current, print_daily
from settings import (
    DEFAULT_DAYS,
    DEFAULT_UNITS,
    Settings,
    get_settings,
    validate_days,
    validate_units,
)
from units import UNIT_FORMATS

logger = logging.getLogger(__name__)

TRUE_VALUES = ("true", "yes", "on", "1")
FALSE_VALUES = ("false", "no", "off", "0")

# Sample moment used to preview each region's date patterns
PREVIEW_TIME = datetime(2006, 1, 2, 15, 4, 5)


def parse_bool(value: str) -> bool:
    """Parse a yes/no style setting value."""
    lowered = value.lower()
    if lowered in TRUE_VALUES:
        return True
    if lowered in FALSE_VALUES:
        return False
    raise ValueError(f"Expected one of {', '.join(TRUE_VALUES + FALSE_VALUES)}")


def read_forecast(fp, settings: Settings) -> Forecast:
    """Load a forecast document, turning format problems into CLI errors."""
    try:
        forecast = load_forecast(fp, default_units=settings.units)
    except ForecastFormatError as e:
        raise click.ClickException(f"Could not read forecast: {e}")
    logger.debug(
        "Loaded forecast with units=%s, %d day(s), %d alert(s)",
        forecast.units,
        len(forecast.daily),
        len(forecast.alerts),
    )
    return forecast


@click.group()
@click.version_option(version="0.1.0")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool):
    """Pretty print weather forecasts in the terminal."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# =============================================================================
# Config commands
# =============================================================================


@cli.group()
def config():
    """View and manage settings."""
    pass


@config.command("show")
def config_show():
    """Show current settings."""
    settings = get_settings()

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("setting", style="dim")
    table.add_column("value", style="bold")

    table.add_row("city", settings.city or "(not set)")
    table.add_row("region", settings.region or "(not set)")
    table.add_row("units", settings.units)
    table.add_row("days", str(settings.days))
    table.add_row("hide_icon", str(settings.hide_icon).lower())
    table.add_row("ignore_alerts", str(settings.ignore_alerts).lower())

    console.print(table)


@config.command("set")
@click.argument("key")
@click.argument("value")
def config_set(key: str, value: str):
    """Set a configuration value.

    \b
    Available settings:
      city           Default city shown in the current weather header
      region         Default region shown in the current weather header
      units          Fallback units: us, si, ca, uk or uk2 (see 'weathertext config regions')
      days           Number of days for the daily forecast
      hide_icon      true or false
      ignore_alerts  true or false
    """
    settings = get_settings()

    try:
        if key == "city":
            settings.city = value
        elif key == "region":
            settings.region = value
        elif key == "units":
            settings.units = validate_units(value)
        elif key == "days":
            settings.days = validate_days(value)
        elif key == "hide_icon":
            settings.hide_icon = parse_bool(value)
        elif key == "ignore_alerts":
            settings.ignore_alerts = parse_bool(value)
        else:
            raise click.ClickException(f"Unknown setting: {key}")
    except ValueError as e:
        raise click.ClickException(f"Invalid value for {key}: {e}")

    settings.save()
    console.print(f"[green]Set {key} = {value}[/green]")


@config.command("unset")
@click.argument("key")
def config_unset(key: str):
    """Unset a configuration value (reset to default)."""
    settings = get_settings()

    if key == "city":
        settings.city = None
    elif key == "region":
        settings.region = None
    elif key == "units":
        settings.units = DEFAULT_UNITS
    elif key == "days":
        settings.days = DEFAULT_DAYS
    elif key == "hide_icon":
        settings.hide_icon = False
    elif key == "ignore_alerts":
        settings.ignore_alerts = False
    else:
        raise click.ClickException(f"Unknown setting: {key}")

    settings.save()
    console.print(f"[green]Unset {key}[/green]")


@config.command("regions")
def config_regions():
    """List the available unit regions."""
    table = Table(show_header=True, box=box.ROUNDED, header_style="bold")
    table.add_column("Units", style="cyan")
    table.add_column("Temp")
    table.add_column("Speed")
    table.add_column("Length")
    table.add_column("Precip")
    table.add_column("Date", style="dim")

    for name, profile in UNIT_FORMATS.items():
        preview = PREVIEW_TIME.strftime(
            profile.long_date.replace("%P", "pm").replace(" %Z", "")
        )
        table.add_row(
            name,
            profile.degrees,
            profile.speed,
            profile.length,
            profile.precipitation,
            preview,
        )

    console.print(table)
    console.print("[dim]'uk' is deprecated, use 'uk2' instead.[/dim]")


# =============================================================================
# Weather commands
# =============================================================================


@cli.command()
@click.argument("forecast_file", type=click.File("r"))
@click.option("--city", help="City shown in the header (default: from config)")
@click.option("--region", help="Region shown in the header (default: from config)")
@click.option("--ignore-alerts", is_flag=True, help="Don't print weather alerts")
@click.option("--hide-icon", is_flag=True, help="Don't print the weather icon")
def current(
    forecast_file,
    city: str | None,
    region: str | None,
    ignore_alerts: bool,
    hide_icon: bool,
):
    """Show current weather from a forecast document.

    FORECAST_FILE is a saved JSON forecast, or '-' to read standard input.
    """
    settings = get_settings()
    forecast = read_forecast(forecast_file, settings)
    location = settings.resolve_location(city, region)

    print_current(
        forecast,
        location,
        ignore_alerts=ignore_alerts or settings.ignore_alerts,
        hide_icon=hide_icon or settings.hide_icon,
    )


@cli.command()
@click.argument("forecast_file", type=click.File("r"))
@click.option(
    "-n",
    "--days",
    type=click.IntRange(min=0),
    help="Number of days to show (default: from config)",
)
def daily(forecast_file, days: int | None):
    """Show the daily forecast from a forecast document.

    FORECAST_FILE is a saved JSON forecast, or '-' to read standard input.
    Today is left out; use 'weathertext current' for it.
    """
    settings = get_settings()
    forecast = read_forecast(forecast_file, settings)

    print_daily(forecast, days if days is not None else settings.days)


@cli.command()
@click.argument("forecast_file", type=click.File("r"))
@click.option("--city", help="City shown in the header (default: from config)")
@click.option("--region", help="Region shown in the header (default: from config)")
@click.option(
    "-n",
    "--days",
    type=click.IntRange(min=0),
    help="Number of days to show (default: from config)",
)
@click.option("--ignore-alerts", is_flag=True, help="Don't print weather alerts")
@click.option("--hide-icon", is_flag=True, help="Don't print the weather icon")
def report(
    forecast_file,
    city: str | None,
    region: str | None,
    days: int | None,
    ignore_alerts: bool,
    hide_icon: bool,
):
    """Show current weather followed by the daily forecast.

    FORECAST_FILE is a saved JSON forecast, or '-' to read standard input.
    """
    settings = get_settings()
    forecast = read_forecast(forecast_file, settings)
    location = settings.resolve_location(city, region)

    print_current(
        forecast,
        location,
        ignore_alerts=ignore_alerts or settings.ignore_alerts,
        hide_icon=hide_icon or settings.hide_icon,
    )
    print_daily(forecast, days if days is not None else settings.days)


if __name__ == "__main__":
    cli()
