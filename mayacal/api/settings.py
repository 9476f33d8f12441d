"""Runtime configuration for the API service, read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable

__all__ = ["APISettings", "get_settings"]


def _parse_bool(value: str | None, *, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _parse_origins(value: str | Iterable[str] | None) -> tuple[str, ...]:
    if value is None:
        return tuple()
    raw_items = value.split(",") if isinstance(value, str) else list(value)
    origins: list[str] = []
    for item in raw_items:
        normalised = str(item).strip()
        if normalised and normalised not in origins:
            origins.append(normalised)
    return tuple(origins)


def _parse_port(value: str | None, default: int = 8000) -> int:
    try:
        return int(value) if value is not None else default
    except ValueError:
        return default


@dataclass(slots=True)
class APISettings:
    """Settings for the API process (bind address, reload, CORS)."""

    host: str = "127.0.0.1"
    port: int = 8000
    reload: bool = False
    log_level: str = "info"
    cors_origins: tuple[str, ...] = tuple()

    @classmethod
    def from_env(cls) -> "APISettings":
        return cls(
            host=os.getenv("MAYACAL_API_HOST", "127.0.0.1"),
            port=_parse_port(os.getenv("MAYACAL_API_PORT")),
            reload=_parse_bool(os.getenv("MAYACAL_API_RELOAD")),
            log_level=os.getenv("MAYACAL_API_LOG_LEVEL", "info"),
            cors_origins=_parse_origins(os.getenv("MAYACAL_API_CORS_ORIGINS")),
        )


@lru_cache(maxsize=1)
def get_settings() -> APISettings:
    """Return cached API settings derived from the environment."""

    return APISettings.from_env()
