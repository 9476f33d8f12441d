"""``units`` subcommand: reference tables for the three counts."""

from __future__ import annotations

import argparse
import json

from ..constants import HAAB_MONTHS, LONG_COUNT_UNITS, MAYAN_EPOCH_JDN, TZOLKIN_NAMES
from ..render import format_units_table


def add_subparser(sub: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = sub.add_parser(
        "units",
        help="List Long Count units and the Tzolkʼin/Haab name tables",
    )
    parser.add_argument("--json", action="store_true", help="Emit JSON output")
    parser.set_defaults(func=run)


def run(args: argparse.Namespace) -> int:
    if args.json:
        payload = {
            "epochJulianDay": MAYAN_EPOCH_JDN,
            "longCountUnits": [{"name": u.name, "days": u.days} for u in LONG_COUNT_UNITS],
            "tzolkinNames": list(TZOLKIN_NAMES),
            "haabMonths": list(HAAB_MONTHS),
        }
        print(json.dumps(payload, indent=2, ensure_ascii=False))
        return 0

    print(f"Epoch 0.0.0.0.0 = JDN {MAYAN_EPOCH_JDN} (11 August 3114 BCE)")
    print()
    print(format_units_table())
    print()
    print("Tzolkʼin names: " + ", ".join(TZOLKIN_NAMES))
    print("Haab months   : " + ", ".join(HAAB_MONTHS))
    return 0
