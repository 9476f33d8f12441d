"""Proleptic Gregorian dates and Julian Day Numbers.

Years are astronomical: year ``0`` is 1 BCE and year ``-3113`` is 3114 BCE.
Parsed strings may instead carry a ``BCE``/``BC`` suffix with a positive
historical year (``3114-08-11 BCE``).

By default the parser performs no range validation on month or day. Values
such as month 13 are passed through to :func:`julian_day_number`, which
normalises them arithmetically. Pass ``strict=True`` to reject them.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date

from .errors import ParseError

_DATE_RE = re.compile(r"^([+-]?\d+)-(\d+)-(\d+)(?:\s*(BCE|BC))?$", re.IGNORECASE)
_NUMERIC_RE = re.compile(r"^[+-]?\d+$")

_MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


@dataclass(frozen=True)
class CalendarDate:
    """A proleptic Gregorian calendar date with no time-of-day component."""

    year: int
    month: int
    day: int

    @classmethod
    def from_date(cls, value: date) -> "CalendarDate":
        return cls(value.year, value.month, value.day)

    def isoformat(self) -> str:
        """Return ``YYYY-MM-DD`` using astronomical year numbering."""

        sign = "-" if self.year < 0 else ""
        return f"{sign}{abs(self.year):04d}-{self.month:02d}-{self.day:02d}"

    def __str__(self) -> str:
        return self.isoformat()


def is_leap_year(year: int) -> bool:
    """Return ``True`` when ``year`` is a proleptic Gregorian leap year."""

    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    if month == 2 and is_leap_year(year):
        return 29
    return _MONTH_LENGTHS[month - 1]


def _describe_failure(text: str) -> str:
    parts = text.split("-")
    if len(parts) < 3:
        return "expected YYYY-MM-DD"
    for label, part in zip(("year", "month", "day"), parts):
        if not _NUMERIC_RE.match(part.strip()):
            return f"{label} component {part!r} is not numeric"
    return "expected YYYY-MM-DD"


def parse_calendar_date(value: str, *, strict: bool = False) -> CalendarDate:
    """Parse ``value`` in ``YYYY-MM-DD`` form into a :class:`CalendarDate`.

    Raises :class:`~mayacal.errors.ParseError` when a component is missing or
    non-numeric. With ``strict`` enabled, months outside 1-12 and days that do
    not exist in the given month are rejected as well.
    """

    if not isinstance(value, str):
        raise ParseError(repr(value), "date must be a string")

    text = value.strip()
    match = _DATE_RE.match(text)
    if match is None:
        raise ParseError(value, _describe_failure(text))

    year_raw, month_raw, day_raw, era = match.groups()
    year = int(year_raw)
    if era is not None:
        if year_raw.startswith(("-", "+")) or year < 1:
            raise ParseError(value, "BCE years must be positive and unsigned")
        year = 1 - year

    parsed = CalendarDate(year, int(month_raw), int(day_raw))
    if strict:
        _validate(parsed, value)
    return parsed


def _validate(parsed: CalendarDate, raw: str) -> None:
    if not 1 <= parsed.month <= 12:
        raise ParseError(raw, f"month {parsed.month} is outside 1-12")
    limit = days_in_month(parsed.year, parsed.month)
    if not 1 <= parsed.day <= limit:
        raise ParseError(raw, f"day {parsed.day} is outside 1-{limit}")


def julian_day_number(calendar_date: CalendarDate) -> int:
    """Return the Julian Day Number of a proleptic Gregorian date.

    Every division floors toward negative infinity, so out-of-range months
    and very early years still yield a consistent integer.
    """

    year, month, day = calendar_date.year, calendar_date.month, calendar_date.day
    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12 * a - 3
    return (
        day
        + (153 * m + 2) // 5
        + 365 * y
        + y // 4
        - y // 100
        + y // 400
        - 32045
    )


def calendar_date_from_julian_day(jdn: int) -> CalendarDate:
    """Invert :func:`julian_day_number` for in-range dates."""

    remainder = jdn + 68569
    cycles = 4 * remainder // 146097
    remainder -= (146097 * cycles + 3) // 4
    years = 4000 * (remainder + 1) // 1461001
    remainder = remainder - 1461 * years // 4 + 31
    months = 80 * remainder // 2447
    day = remainder - 2447 * months // 80
    carry = months // 11
    month = months + 2 - 12 * carry
    year = 100 * (cycles - 49) + years + carry
    return CalendarDate(year, month, day)


__all__ = [
    "CalendarDate",
    "calendar_date_from_julian_day",
    "days_in_month",
    "is_leap_year",
    "julian_day_number",
    "parse_calendar_date",
]
