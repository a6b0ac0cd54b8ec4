"""Forecast normalizer: maps a raw Dark Sky payload onto the canonical Forecast."""

import logging
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from weatherchart.errors import NormalizationError
from weatherchart.models.darksky import DarkSkyHour, DarkSkyPayload
from weatherchart.models.forecast import MAX_HOURS, Forecast, HourlyForecast

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NormalizationResult:
    ok: bool
    forecast: Forecast | None = None
    error: str = ""


def parse_forecast(raw: Any) -> NormalizationResult:
    """Validate and map an upstream payload without raising.

    Returns a failed result naming the first offending field path when a
    required field is absent, mistyped or out of range.
    """
    if not isinstance(raw, dict):
        return _failure(f"Expected a JSON object, got {type(raw).__name__}")

    try:
        payload = DarkSkyPayload.model_validate(raw)
    except ValidationError as e:
        return _invalid(e)

    currently = payload.currently
    if currently is None:
        return _failure("Forecast is missing currently")
    for name in ("temperature", "apparentTemperature", "summary"):
        if getattr(currently, name) is None:
            return _failure(f"Forecast is missing currently.{name}")

    hourly = payload.hourly
    if hourly is None:
        return _failure("Forecast is missing hourly")
    if hourly.summary is None:
        return _failure("Forecast is missing hourly.summary")
    if not hourly.data:
        return _failure("Forecast is missing hourly.data")

    hours: list[HourlyForecast] = []
    for i, entry in enumerate(hourly.data[:MAX_HOURS]):
        try:
            hour = DarkSkyHour.model_validate(entry)
        except ValidationError as e:
            return _invalid(e, prefix=("hourly", "data", i))
        for name in ("temperature", "apparentTemperature", "precipProbability"):
            if getattr(hour, name) is None:
                return _failure(f"Forecast is missing hourly.data.{i}.{name}")
        hours.append(
            HourlyForecast(
                temperature=hour.temperature,
                feels_like=hour.apparentTemperature,
                precipitation_probability=hour.precipProbability,
            )
        )

    alerts: list[str] = []
    for i, alert in enumerate(payload.alerts or []):
        if not alert.title:
            logger.warning("Skipping untitled alert at alerts.%d", i)
            continue
        alerts.append(alert.title)

    return NormalizationResult(
        ok=True,
        forecast=Forecast(
            temperature=currently.temperature,
            feels_like=currently.apparentTemperature,
            current_summary=currently.summary,
            future_summary=hourly.summary,
            hourly=tuple(hours),
            alerts=tuple(alerts),
        ),
    )


def normalize_forecast(raw: Any) -> Forecast:
    """Map an upstream payload to a Forecast, raising NormalizationError on failure."""
    result = parse_forecast(raw)
    if not result.ok:
        logger.warning("Forecast normalization failed: %s", result.error)
        raise NormalizationError(result.error)
    assert result.forecast is not None
    return result.forecast


def _failure(message: str) -> NormalizationResult:
    return NormalizationResult(ok=False, error=message)


def _invalid(e: ValidationError, prefix: tuple = ()) -> NormalizationResult:
    first = e.errors()[0]
    path = ".".join(str(p) for p in prefix + tuple(first["loc"]))
    return _failure(f"Invalid forecast field {path}: {first['msg']}")
