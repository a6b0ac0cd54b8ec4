"""Pydantic schema for the subset of a Dark Sky payload we consume.

Every field is optional so that validation itself never fails on a sparse
payload; the normalizer decides which absences are fatal. Unknown fields
are ignored. Hourly entries stay raw here and are validated one by one, so
hours past the forecast window never reject a payload.
"""

from typing import Any

from pydantic import BaseModel, Field


class DarkSkyAlert(BaseModel):
    model_config = {"extra": "ignore"}

    title: str | None = None


class DarkSkyCurrently(BaseModel):
    model_config = {"extra": "ignore", "allow_inf_nan": False}

    temperature: float | None = None
    apparentTemperature: float | None = None
    summary: str | None = None


class DarkSkyHour(BaseModel):
    model_config = {"extra": "ignore", "allow_inf_nan": False}

    temperature: float | None = None
    apparentTemperature: float | None = None
    precipProbability: float | None = Field(default=None, ge=0.0, le=1.0)


class DarkSkyHourly(BaseModel):
    model_config = {"extra": "ignore"}

    summary: str | None = None
    data: list[Any] | None = None


class DarkSkyPayload(BaseModel):
    model_config = {"extra": "ignore"}

    alerts: list[DarkSkyAlert] | None = None
    currently: DarkSkyCurrently | None = None
    hourly: DarkSkyHourly | None = None
