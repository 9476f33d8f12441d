"""``config`` subcommand for inspecting persisted settings."""

from __future__ import annotations

import argparse

import yaml

from ..config import config_path, default_settings, save_settings
from ._common import load_cli_settings


def add_subparser(sub: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = sub.add_parser("config", help="Show or reset persisted settings")
    actions = parser.add_subparsers(dest="config_action", required=True)

    show = actions.add_parser("show", help="Print the effective settings as YAML")
    show.set_defaults(func=run_show)

    path = actions.add_parser("path", help="Print the settings file location")
    path.set_defaults(func=run_path)

    reset = actions.add_parser("reset", help="Overwrite settings with defaults")
    reset.set_defaults(func=run_reset)


def run_show(args: argparse.Namespace) -> int:
    settings = load_cli_settings()
    print(yaml.safe_dump(settings.model_dump(), sort_keys=False, allow_unicode=True), end="")
    return 0


def run_path(args: argparse.Namespace) -> int:
    print(config_path())
    return 0


def run_reset(args: argparse.Namespace) -> int:
    target = save_settings(default_settings())
    print(f"Settings reset: {target}")
    return 0
