"""Configuration models and YAML persistence for mayacal."""

from __future__ import annotations

import logging
import os
from copy import deepcopy
from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, Field

LOG = logging.getLogger(__name__)

CURRENT_SETTINGS_SCHEMA_VERSION = 2
CONFIG_FILENAME = "config.yaml"

# -------------------- Settings Schema --------------------


class ConversionCfg(BaseModel):
    """How date strings are accepted before conversion."""

    validation: Literal["passthrough", "strict"] = Field(
        default="passthrough",
        description=(
            "passthrough lets impossible months/days flow into the Julian Day "
            "formula; strict rejects them as parse errors."
        ),
    )

    @property
    def strict(self) -> bool:
        return self.validation == "strict"


class RenderCfg(BaseModel):
    """Output preferences for the command line."""

    output: Literal["text", "json"] = "text"
    show_units_table: bool = False
    json_indent: int = Field(default=2, ge=0, le=8)


class Settings(BaseModel):
    """Top-level settings model persisted on disk."""

    schema_version: int = Field(
        default=CURRENT_SETTINGS_SCHEMA_VERSION,
        ge=1,
        description="Version marker for persisted configuration payloads.",
    )
    conversion: ConversionCfg = Field(default_factory=ConversionCfg)
    render: RenderCfg = Field(default_factory=RenderCfg)


# -------------------- Persistence --------------------


def get_config_home() -> Path:
    """Return the directory where settings are stored."""

    return Path(os.environ.get("MAYACAL_HOME", str(Path.home() / ".mayacal")))


def config_path() -> Path:
    """Return the configuration file path, creating its directory as needed."""

    home = get_config_home()
    home.mkdir(parents=True, exist_ok=True)
    return home / CONFIG_FILENAME


def default_settings() -> Settings:
    return Settings()


def save_settings(settings: Settings, path: Optional[Path] = None) -> Path:
    """Persist ``settings`` as YAML and return the file written."""

    target_path = Path(path) if path else config_path()
    target_path.parent.mkdir(parents=True, exist_ok=True)
    with target_path.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(settings.model_dump(), handle, sort_keys=False, allow_unicode=True)
    return target_path


def _coerce_schema_version(raw: object) -> int:
    try:
        value = int(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return 1
    return max(1, value)


def _upgrade_settings_payload(
    data: dict[str, object], *, schema_version: int
) -> tuple[dict[str, object], bool]:
    """Return ``data`` migrated to the current schema and whether it changed."""

    upgraded = deepcopy(data)
    changed = False

    if schema_version < 2:
        # v1 stored the validation mode as a top-level ``strict`` boolean.
        legacy_strict = upgraded.pop("strict", None)
        if legacy_strict is not None:
            conversion = dict(upgraded.get("conversion") or {})  # type: ignore[arg-type]
            conversion.setdefault(
                "validation", "strict" if legacy_strict else "passthrough"
            )
            upgraded["conversion"] = conversion
        changed = True

    if upgraded.get("schema_version") != CURRENT_SETTINGS_SCHEMA_VERSION:
        upgraded["schema_version"] = CURRENT_SETTINGS_SCHEMA_VERSION
        changed = True

    return upgraded, changed


def load_settings(path: Optional[Path] = None) -> Settings:
    """Load settings from disk, writing defaults when the file is missing."""

    source_path = Path(path) if path else config_path()
    if not source_path.exists():
        settings = default_settings()
        save_settings(settings, source_path)
        return settings

    with source_path.open("r", encoding="utf-8") as handle:
        raw = yaml.safe_load(handle) or {}
    if not isinstance(raw, dict):
        LOG.warning("Ignoring malformed settings payload in %s", source_path)
        raw = {}

    schema_version = _coerce_schema_version(raw.get("schema_version"))
    data, upgraded = _upgrade_settings_payload(raw, schema_version=schema_version)
    settings = Settings(**data)
    if upgraded:
        LOG.info("Upgraded settings schema in %s to v%d", source_path, settings.schema_version)
        save_settings(settings, source_path)
    return settings


def ensure_default_config() -> Path:
    """Ensure a configuration file exists on disk and return its path."""

    target = config_path()
    if not target.exists():
        save_settings(default_settings(), target)
    return target
