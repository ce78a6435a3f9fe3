"""Environment-driven application settings."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


@dataclass(frozen=True)
class Settings:
    app_name: str
    app_version: str
    log_level: str
    recommendation_top_n: int


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Build settings once per process; tests reset with ``cache_clear``."""
    top_n = _env_int("RECOMMENDATION_TOP_N", 10)
    if top_n < 0:
        raise ValueError("RECOMMENDATION_TOP_N must be >= 0")
    return Settings(
        app_name=os.getenv("APP_NAME", "Front Desk Room Change Advisor"),
        app_version=os.getenv("APP_VERSION", "0.1.0"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        recommendation_top_n=top_n,
    )
