"""Configuration helpers exposed at :mod:`mayacal.config`."""

from __future__ import annotations

from .settings import (
    CONFIG_FILENAME,
    CURRENT_SETTINGS_SCHEMA_VERSION,
    ConversionCfg,
    RenderCfg,
    Settings,
    config_path,
    default_settings,
    ensure_default_config,
    get_config_home,
    load_settings,
    save_settings,
)

__all__ = [
    "CONFIG_FILENAME",
    "CURRENT_SETTINGS_SCHEMA_VERSION",
    "ConversionCfg",
    "RenderCfg",
    "Settings",
    "config_path",
    "default_settings",
    "ensure_default_config",
    "get_config_home",
    "load_settings",
    "save_settings",
]
