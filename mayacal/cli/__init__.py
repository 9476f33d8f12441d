"""mayacal command line interface package."""

from __future__ import annotations

from .__main__ import build_parser, console_main, main

__all__ = ["build_parser", "console_main", "main"]
