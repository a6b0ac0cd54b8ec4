"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

from weatherchart.ingest.forecast_source import FIXTURE_DIR
from weatherchart.models.forecast import Forecast, HourlyForecast


def _make_forecast(
    feels_like: list[float],
    probs: list[float] | None = None,
    alerts: tuple[str, ...] = (),
    current_summary: str = "Overcast",
    future_summary: str = "Rain later.",
) -> Forecast:
    probs = probs if probs is not None else [0.0] * len(feels_like)
    return Forecast(
        temperature=feels_like[0] + 2,
        feels_like=feels_like[0],
        current_summary=current_summary,
        future_summary=future_summary,
        hourly=tuple(
            HourlyForecast(temperature=t + 2, feels_like=t, precipitation_probability=p)
            for t, p in zip(feels_like, probs)
        ),
        alerts=alerts,
    )


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def recorded_payload() -> dict:
    """The recorded Dark Sky payload shipped for zip code 02130."""
    with open(FIXTURE_DIR / "darksky_02130.json", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def minimal_payload() -> dict:
    return {
        "currently": {
            "temperature": 50.0,
            "apparentTemperature": 48.4,
            "summary": "Clear",
        },
        "hourly": {
            "summary": "Clear throughout the day.",
            "data": [
                {"temperature": 50.0, "apparentTemperature": 48.0, "precipProbability": 0},
                {"temperature": 52.0, "apparentTemperature": 51.0, "precipProbability": 0.2},
                {"temperature": 54.0, "apparentTemperature": 53.0, "precipProbability": 0.5},
            ],
        },
    }


@pytest.fixture
def dry_forecast() -> Forecast:
    """25 hours, rising temperatures, no rain."""
    return _make_forecast([30.0 + i for i in range(25)])


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "darksky": {"base_url": "https://test-darksky.example.com"},
        "geocoding": {"base_url": "https://test-smarty.example.com"},
        "server": {"port": 9000},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def make_forecast():
    """Factory building a Forecast from feels-like temperatures and rain odds."""
    return _make_forecast
