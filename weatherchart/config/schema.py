"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field


class DarkSkyConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = "https://api.darksky.net"
    secret: str = ""
    timeout_seconds: float = Field(default=10.0, gt=0.0)


class GeocodingConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = "https://us-zipcode.api.smartystreets.com"
    auth_id: str = ""
    auth_token: str = ""
    timeout_seconds: float = Field(default=10.0, gt=0.0)


class ServerConfig(BaseModel):
    model_config = {"extra": "forbid"}

    host: str = "127.0.0.1"
    port: int = Field(default=8000, ge=1, le=65535)


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    darksky: DarkSkyConfig = DarkSkyConfig()
    geocoding: GeocodingConfig = GeocodingConfig()
    server: ServerConfig = ServerConfig()
    # zip code -> recorded Dark Sky payload, served instead of live data
    fixtures: dict[str, str] = {"02130": "darksky_02130.json"}
