from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


_BASE_URL_ENV = "SENSOR_API_BASE_URL"
_TIMEOUT_ENV = "SENSOR_API_TIMEOUT"
_WINDOW_HOURS_ENV = "SENSOR_DEFAULT_WINDOW_HOURS"
_LOG_LEVEL_ENV = "LOG_LEVEL"

DEFAULT_BASE_URL = "http://localhost:8080/api"
DEFAULT_TIMEOUT = 10.0
DEFAULT_WINDOW_HOURS = 24


@dataclass(frozen=True)
class Settings:
    api_base_url: str
    request_timeout: float
    default_window_hours: int
    log_level: str


def _read_str_env(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    return candidate or default


def _read_timeout(default: float) -> float:
    value = os.getenv(_TIMEOUT_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    try:
        parsed = float(candidate)
    except ValueError:
        return default
    return parsed if parsed > 0 else default


def _read_window_hours(default: int) -> int:
    value = os.getenv(_WINDOW_HOURS_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    try:
        parsed = int(candidate)
    except ValueError:
        return default
    return parsed if parsed > 0 else default


def _read_log_level(default: str) -> str:
    value = os.getenv(_LOG_LEVEL_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    return candidate.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings(
        api_base_url=_read_str_env(_BASE_URL_ENV, DEFAULT_BASE_URL).rstrip("/"),
        request_timeout=_read_timeout(DEFAULT_TIMEOUT),
        default_window_hours=_read_window_hours(DEFAULT_WINDOW_HOURS),
        log_level=_read_log_level("INFO"),
    )
