"""Logging setup shared by the CLI and the API service."""

from __future__ import annotations

import logging
import os
from typing import Any

__all__ = ["configure_logging", "resolve_level"]

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"
_ENV_VARS = ("MAYACAL_LOG_LEVEL", "LOG_LEVEL")


def resolve_level(value: str | int | None) -> int:
    """Translate a level name or number into a :mod:`logging` level.

    Unknown names, blanks and ``None`` resolve to :data:`logging.INFO`.
    """

    if isinstance(value, int):
        return value
    if value is None or not value.strip():
        return logging.INFO

    candidate = value.strip()
    if candidate.isdigit():
        return int(candidate)

    resolved = logging.getLevelName(candidate.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def _level_from_env() -> str | None:
    for name in _ENV_VARS:
        raw = os.environ.get(name)
        if raw:
            return raw
    return None


def configure_logging(*, level: str | int | None = None, **kwargs: Any) -> int:
    """Configure the root logger and return the level applied.

    ``MAYACAL_LOG_LEVEL`` (then ``LOG_LEVEL``) is consulted when ``level`` is
    omitted. Extra keyword arguments go to :func:`logging.basicConfig`.
    """

    effective = resolve_level(level if level is not None else _level_from_env())
    kwargs.setdefault("format", _FORMAT)
    kwargs.setdefault("datefmt", _DATEFMT)
    kwargs.setdefault("force", True)
    logging.basicConfig(level=effective, **kwargs)
    return effective
