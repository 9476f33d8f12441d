"""API routers."""

from __future__ import annotations

from . import health, mayan

__all__ = ["health", "mayan"]
