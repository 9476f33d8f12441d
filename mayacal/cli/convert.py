"""``convert`` and ``today`` subcommands."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from ..config import Settings
from ..converter import MayanDate, convert_strict, from_long_count, from_offset, today
from ..errors import MayanDateError
from ..long_count import parse_long_count
from ..render import NOT_REPRESENTABLE_MESSAGE, format_summary
from ._common import load_cli_settings

LOG = logging.getLogger(__name__)


def _add_output_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--json", action="store_true", help="Emit JSON output")
    parser.add_argument(
        "--table",
        action="store_true",
        help="Append the Long Count unit breakdown to the text summary",
    )


def add_subparser(sub: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    """Register the ``convert`` and ``today`` subcommands."""

    parser = sub.add_parser(
        "convert",
        help="Convert a Gregorian date to Long Count, Tzolkʼin and Haab",
        description=(
            "Convert a proleptic Gregorian date (YYYY-MM-DD, astronomical years or "
            "a BCE suffix) into the Mesoamerican calendars. Alternatively look up "
            "a Long Count or a raw day offset from 0.0.0.0.0."
        ),
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("date", nargs="?", help="Gregorian date, e.g. 2012-12-21")
    source.add_argument(
        "--long-count",
        metavar="B.K.T.U.K",
        help="Resolve a Long Count such as 9.12.11.5.18",
    )
    source.add_argument(
        "--offset",
        type=int,
        metavar="DAYS",
        help="Resolve a day count since 0.0.0.0.0",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject impossible months and days instead of passing them through",
    )
    _add_output_flags(parser)
    parser.set_defaults(func=run)

    today_parser = sub.add_parser(
        "today",
        help="Show today's date in the Mesoamerican calendars",
    )
    _add_output_flags(today_parser)
    today_parser.set_defaults(func=run_today)


def _emit(result: MayanDate, args: argparse.Namespace, settings: Settings) -> None:
    if args.json or settings.render.output == "json":
        print(json.dumps(result.to_dict(), indent=settings.render.json_indent, ensure_ascii=False))
        return
    print(format_summary(result, units_table=args.table or settings.render.show_units_table))


def _resolve(args: argparse.Namespace, settings: Settings) -> MayanDate:
    if args.long_count is not None:
        return from_long_count(parse_long_count(args.long_count))
    if args.offset is not None:
        return from_offset(args.offset)
    strict = args.strict or settings.conversion.strict
    return convert_strict(args.date, strict=strict)


def run(args: argparse.Namespace) -> int:
    """Execute the convert subcommand."""

    settings = load_cli_settings()
    try:
        result = _resolve(args, settings)
    except MayanDateError as exc:
        LOG.debug("convert failed: %s", exc)
        print(NOT_REPRESENTABLE_MESSAGE, file=sys.stderr)
        print(f"  {exc}", file=sys.stderr)
        return 1

    _emit(result, args, settings)
    return 0


def run_today(args: argparse.Namespace) -> int:
    """Execute the today subcommand."""

    settings = load_cli_settings()
    _emit(today(), args, settings)
    return 0
