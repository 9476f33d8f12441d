"""Entry point for the mayacal CLI."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from ..boot.logging import configure_logging
from . import config, convert, reference, serve


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mayacal",
        description="Gregorian to Mayan Long Count, Tzolkʼin and Haab converter",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    convert.add_subparser(sub)
    reference.add_subparser(sub)
    config.add_subparser(sub)
    serve.add_subparser(sub)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    configure_logging()
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    return args.func(args)


def console_main() -> None:  # pragma: no cover - console script shim
    raise SystemExit(main())


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
