"""Canonical forecast data models."""

from dataclasses import dataclass, field

MAX_HOURS = 25


@dataclass(frozen=True)
class HourlyForecast:
    temperature: float
    feels_like: float
    precipitation_probability: float  # 0.0 - 1.0


@dataclass(frozen=True)
class Forecast:
    temperature: float
    feels_like: float
    current_summary: str
    future_summary: str
    hourly: tuple[HourlyForecast, ...]
    alerts: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class LatLng:
    latitude: float
    longitude: float
