"""Plain-text rendering of conversion results."""

from __future__ import annotations

from collections.abc import Sequence

from .constants import HAAB_CYCLE_LENGTH, TZOLKIN_CYCLE_LENGTH
from .converter import MayanDate
from .long_count import LongCount

NOT_REPRESENTABLE_MESSAGE = (
    "Select a valid date on or after 11 August 3114 BCE (YYYY-MM-DD)."
)


def format_long_count(long_count: LongCount) -> str:
    return long_count.label()


def _table(headers: Sequence[str], rows: Sequence[Sequence[str]], *, right: set[int]) -> str:
    widths = [len(column) for column in headers]
    for row in rows:
        for idx, cell in enumerate(row):
            widths[idx] = max(widths[idx], len(cell))

    def _line(cells: Sequence[str]) -> str:
        return " | ".join(
            cell.rjust(widths[idx]) if idx in right else cell.ljust(widths[idx])
            for idx, cell in enumerate(cells)
        )

    divider = "-+-".join("-" * width for width in widths)
    return "\n".join([_line(headers), divider, *(_line(row) for row in rows)])


def format_units_table(long_count: LongCount | None = None) -> str:
    """Return the Unit / Days / Value table for ``long_count``.

    Without a Long Count only the unit sizes are listed.
    """

    source = long_count or LongCount(0, 0, 0, 0, 0)
    rows = []
    for name, days, value in source.units():
        row = [name.capitalize(), f"{days:,}"]
        if long_count is not None:
            row.append(str(value))
        rows.append(row)
    headers = ["Unit", "Days"] + (["Value"] if long_count is not None else [])
    return _table(headers, rows, right={1, 2})


def format_summary(result: MayanDate, *, units_table: bool = False) -> str:
    """Return a multi-line summary of ``result``."""

    lines = [
        f"Gregorian   : {result.date.isoformat()}",
        f"Julian Day  : {result.julian_day}",
        f"Long Count  : {format_long_count(result.long_count)}",
        f"Tzolkʼin    : {result.tzolkin.label()} ({TZOLKIN_CYCLE_LENGTH}-day ritual count)",
        f"Haab        : {result.haab.label()} ({HAAB_CYCLE_LENGTH}-day solar count)",
    ]
    if units_table:
        lines.extend(["", format_units_table(result.long_count)])
    return "\n".join(lines)


__all__ = [
    "NOT_REPRESENTABLE_MESSAGE",
    "format_long_count",
    "format_summary",
    "format_units_table",
]
