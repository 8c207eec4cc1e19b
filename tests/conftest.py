"""Shared test fixtures."""

import io
import json
from pathlib import Path

import pytest
from rich.console import Console

import settings
from models import Alert, Forecast, WeatherSample

# 2006-01-02 15:04:05 UTC, a Monday
NOW = 1136214245
MIDNIGHT = 1136160000
DAY = 86400


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch) -> Path:
    """Point the settings file at a temporary directory."""
    config_dir = tmp_path / "config"
    monkeypatch.setattr(settings, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(settings, "CONFIG_FILE", config_dir / "config.json")
    return config_dir / "config.json"


@pytest.fixture
def out() -> Console:
    """A console that records plain text."""
    return Console(
        file=io.StringIO(),
        width=200,
        color_system=None,
        highlight=False,
        emoji=False,
        soft_wrap=True,
    )


@pytest.fixture
def forecast() -> Forecast:
    """A US forecast with today plus four more days."""
    daily = [
        WeatherSample(
            time=MIDNIGHT + i * DAY,
            temperature_max=80 + i,
            temperature_max_time=MIDNIGHT + i * DAY + 15 * 3600,
            temperature_min=60 + i,
            temperature_min_time=MIDNIGHT + i * DAY + 5 * 3600,
            apparent_temperature_max=82 + i,
            apparent_temperature_min=58 + i,
            humidity=0.5,
            visibility=10,
            pressure=1015.5,
        )
        for i in range(5)
    ]
    return Forecast(
        units="us",
        currently=WeatherSample(
            time=NOW,
            summary="Partly Cloudy",
            icon="partly-cloudy-day",
            temperature=72,
            apparent_temperature=70,
            humidity=0.25,
            wind_speed=5.5,
            wind_bearing=90,
            visibility=10,
            pressure=1013.2,
        ),
        daily=daily,
        alerts=[
            Alert(
                title="Flood Watch",
                description="Heavy rain expected.\n",
                time=NOW,
                expires=NOW + 3600,
            )
        ],
    )


@pytest.fixture
def forecast_doc() -> dict:
    """A provider style JSON document."""
    return {
        "latitude": 40.7,
        "longitude": -73.9,
        "timezone": "America/New_York",
        "currently": {
            "time": NOW,
            "summary": "Clear",
            "icon": "clear-day",
            "temperature": 72.5,
            "apparentTemperature": 71,
            "humidity": 0.4,
            "windSpeed": 3,
            "windBearing": 200,
            "visibility": 10,
            "pressure": 1012,
        },
        "daily": {
            "data": [
                {"time": MIDNIGHT, "temperatureMax": 80, "temperatureMin": 60},
                {
                    "time": MIDNIGHT + DAY,
                    "temperatureMax": 81,
                    "temperatureMaxTime": MIDNIGHT + DAY + 15 * 3600,
                    "temperatureMin": 61,
                    "temperatureMinTime": MIDNIGHT + DAY + 5 * 3600,
                    "apparentTemperatureMax": 83,
                    "apparentTemperatureMin": 59,
                    "precipIntensity": 0.02,
                    "precipType": "rain",
                    "visibility": 10,
                },
            ]
        },
        "alerts": [
            {
                "title": "Heat Advisory",
                "description": "Stay cool.\n",
                "time": NOW,
                "expires": NOW + 7200,
                "uri": "https://example.com/alert",
            }
        ],
        "flags": {"units": "si"},
    }


@pytest.fixture
def forecast_path(tmp_path: Path, forecast_doc: dict) -> Path:
    path = tmp_path / "forecast.json"
    path.write_text(json.dumps(forecast_doc))
    return path
