"""Forecast sources: live upstream data or recorded payloads, selected by config."""

import json
import logging
from pathlib import Path
from typing import Protocol

from weatherchart.config.schema import AppConfig
from weatherchart.ingest.darksky_client import DarkSkyClient
from weatherchart.ingest.geocoding_client import SmartyStreetsClient
from weatherchart.ingest.normalizer import normalize_forecast
from weatherchart.models.forecast import Forecast

logger = logging.getLogger(__name__)

FIXTURE_DIR = Path(__file__).parent / "fixtures"


class ForecastSource(Protocol):
    def get_forecast(self, zipcode: str) -> Forecast: ...


class LiveForecastSource:
    """Geocodes the zip code, then fetches and normalizes the forecast."""

    def __init__(self, geocoder: SmartyStreetsClient, darksky: DarkSkyClient):
        self.geocoder = geocoder
        self.darksky = darksky

    def get_forecast(self, zipcode: str) -> Forecast:
        point = self.geocoder.lookup(zipcode)
        raw = self.darksky.get_forecast(point.latitude, point.longitude)
        return normalize_forecast(raw)


class FixtureForecastSource:
    """Serves recorded Dark Sky payloads keyed by zip code.

    Used to stay clear of upstream rate limits while testing.
    """

    def __init__(self, fixtures: dict[str, str | Path], base_dir: Path = FIXTURE_DIR):
        self.paths = {
            zipcode: _resolve(path, base_dir) for zipcode, path in fixtures.items()
        }

    def __contains__(self, zipcode: str) -> bool:
        return zipcode in self.paths

    def get_forecast(self, zipcode: str) -> Forecast:
        path = self.paths.get(zipcode)
        if path is None:
            raise KeyError(f"No recorded forecast for zip code {zipcode}")
        logger.info("Serving recorded forecast for zipcode=%s from %s", zipcode, path.name)
        with open(path, encoding="utf-8") as f:
            return normalize_forecast(json.load(f))


class RoutingForecastSource:
    """Recorded payloads for configured zip codes, live data for the rest."""

    def __init__(self, recorded: FixtureForecastSource, live: ForecastSource):
        self.recorded = recorded
        self.live = live

    def get_forecast(self, zipcode: str) -> Forecast:
        if zipcode in self.recorded:
            return self.recorded.get_forecast(zipcode)
        return self.live.get_forecast(zipcode)


def build_forecast_source(config: AppConfig) -> ForecastSource:
    geocoder = SmartyStreetsClient(
        auth_id=config.geocoding.auth_id,
        auth_token=config.geocoding.auth_token,
        base_url=config.geocoding.base_url,
        timeout=config.geocoding.timeout_seconds,
    )
    darksky = DarkSkyClient(
        secret=config.darksky.secret,
        base_url=config.darksky.base_url,
        timeout=config.darksky.timeout_seconds,
    )
    live = LiveForecastSource(geocoder, darksky)
    if not config.fixtures:
        return live
    return RoutingForecastSource(FixtureForecastSource(config.fixtures), live)


def _resolve(path: str | Path, base_dir: Path) -> Path:
    path = Path(path)
    return path if path.is_absolute() else base_dir / path
