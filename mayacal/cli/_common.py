"""Helpers shared by CLI subcommands."""

from __future__ import annotations

import logging

import yaml
from pydantic import ValidationError

from ..config import Settings, default_settings, load_settings

LOG = logging.getLogger(__name__)


def load_cli_settings() -> Settings:
    """Load persisted settings, falling back to defaults when they are unreadable."""

    try:
        return load_settings()
    except (OSError, yaml.YAMLError, ValidationError) as exc:
        LOG.warning("Failed to load persisted settings; using defaults: %s", exc)
        return default_settings()
