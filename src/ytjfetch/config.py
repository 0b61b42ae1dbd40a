"""Runtime settings for the registry client."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import yaml

DEFAULT_API_URL = "https://avoindata.prh.fi/opendata-ytj-api/v3/companies"

_ENV_KEYS: dict[str, str] = {
    "api_url": "YTJ_API_URL",
    "max_attempts": "YTJ_MAX_ATTEMPTS",
    "retry_delay": "YTJ_RETRY_DELAY",
    "timeout": "YTJ_TIMEOUT",
}


@dataclass(frozen=True)
class Settings:
    api_url: str = DEFAULT_API_URL
    max_attempts: int = 5
    retry_delay: float = 5.0
    timeout: tuple[float, float] = (5.0, 30.0)


def _parse_timeout(value: Any) -> tuple[float, float]:
    if isinstance(value, str):
        parts: list[Any] = [part for part in value.replace(";", ",").split(",") if part.strip()]
    elif isinstance(value, (list, tuple)):
        parts = list(value)
    else:
        parts = [value]

    if len(parts) == 1:
        return (float(parts[0]), Settings.timeout[1])
    if len(parts) == 2:
        return (float(parts[0]), float(parts[1]))
    raise ValueError(f"Ungültiger Timeout-Wert: {value!r}")


def _coerce(key: str, value: Any) -> Any:
    try:
        if key == "api_url":
            text = str(value).strip()
            if not text:
                raise ValueError("leer")
            return text
        if key == "max_attempts":
            attempts = int(value)
            if attempts < 1:
                raise ValueError("muss mindestens 1 sein")
            return attempts
        if key == "retry_delay":
            delay = float(value)
            if delay < 0:
                raise ValueError("darf nicht negativ sein")
            return delay
        return _parse_timeout(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Ungültiger Wert für {key}: {value!r} ({exc})") from exc


def _from_mapping(settings: Settings, data: Mapping[str, Any]) -> Settings:
    changes: dict[str, Any] = {}
    for key, value in data.items():
        str_key = str(key)
        if str_key not in _ENV_KEYS:
            raise ValueError(f"Unbekannter Konfigurationsschlüssel: {str_key}")
        if value is None:
            continue
        changes[str_key] = _coerce(str_key, value)
    return replace(settings, **changes)


def load_settings(path: str | None = None) -> Settings:
    """Build settings from defaults, an optional YAML file and the environment."""

    settings = Settings()

    if path:
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Konfigurationsdatei nicht gefunden: {config_path}")

        data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
        if data is not None:
            if not isinstance(data, Mapping):
                raise ValueError("Konfigurations-YAML muss ein Dictionary enthalten")
            settings = _from_mapping(settings, data)

    env_values = {
        key: os.environ[env_key]
        for key, env_key in _ENV_KEYS.items()
        if os.environ.get(env_key, "").strip()
    }
    return _from_mapping(settings, env_values)


__all__ = ["DEFAULT_API_URL", "Settings", "load_settings"]
