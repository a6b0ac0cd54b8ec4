"""YAML config loader with environment secret overlay."""

import os
from pathlib import Path
from typing import Any

import yaml

from weatherchart.config.schema import AppConfig

# config key path -> environment variable
SECRET_ENV_VARS: dict[tuple[str, str], str] = {
    ("darksky", "secret"): "DARK_SKY_SECRET",
    ("geocoding", "auth_id"): "SMARTYSTREETS_KEY",
    ("geocoding", "auth_token"): "SMARTYSTREETS_TOKEN",
}


def load_config(
    path: str | Path | None = None, environ: dict[str, str] | None = None
) -> AppConfig:
    """Load and validate config from a YAML file.

    Secrets set in the environment override the file. With no path, only
    defaults and the environment apply.
    """
    raw: Any = {}
    if path is not None:
        with open(Path(path), encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

    env = os.environ if environ is None else environ
    if isinstance(raw, dict):
        for (section, key), var in SECRET_ENV_VARS.items():
            value = env.get(var)
            current = raw.get(section) or {}
            if value and isinstance(current, dict):
                raw[section] = {**current, key: value}

    return AppConfig.model_validate(raw)


def get_config_value(config: AppConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'server.port'."""
    obj: Any = config
    for part in dotted_key.split("."):
        if isinstance(obj, dict):
            obj = obj[part]
        elif hasattr(obj, part):
            obj = getattr(obj, part)
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj


def redacted(config: AppConfig) -> AppConfig:
    """Return a copy with every configured secret masked."""
    data = config.model_dump()
    for section, key in SECRET_ENV_VARS:
        if data[section][key]:
            data[section][key] = "***"
    return AppConfig(**data)
