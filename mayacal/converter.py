"""Gregorian date to Long Count, Tzolkʼin and Haab conversion."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date
from typing import Any

from .constants import MAYAN_EPOCH_JDN
from .errors import MayanDateError, OutOfRangeError
from .gregorian import (
    CalendarDate,
    calendar_date_from_julian_day,
    julian_day_number,
    parse_calendar_date,
)
from .haab import Haab, haab_from_offset
from .long_count import LongCount, epoch_offset, long_count_from_offset
from .tzolkin import Tzolkin, tzolkin_from_offset

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class MayanDate:
    """A Gregorian date together with its three Mesoamerican counts."""

    date: CalendarDate
    julian_day: int
    offset: int
    long_count: LongCount
    tzolkin: Tzolkin
    haab: Haab

    def calendar_round(self) -> str:
        """Return the Tzolkʼin and Haab labels combined (e.g., ``4 Ajaw 8 Kumkʼu``)."""

        return f"{self.tzolkin.label()} {self.haab.label()}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date.isoformat(),
            "julianDay": self.julian_day,
            "offset": self.offset,
            "longCount": {
                "baktun": self.long_count.baktun,
                "katun": self.long_count.katun,
                "tun": self.long_count.tun,
                "uinal": self.long_count.uinal,
                "kin": self.long_count.kin,
                "label": self.long_count.label(),
            },
            "tzolkin": {
                "number": self.tzolkin.number,
                "name": self.tzolkin.name,
                "label": self.tzolkin.label(),
            },
            "haab": {
                "day": self.haab.day,
                "month": self.haab.month,
                "label": self.haab.label(),
            },
        }


def _derive(calendar_date: CalendarDate, jdn: int, offset: int) -> MayanDate:
    return MayanDate(
        date=calendar_date,
        julian_day=jdn,
        offset=offset,
        long_count=long_count_from_offset(offset),
        tzolkin=tzolkin_from_offset(offset),
        haab=haab_from_offset(offset),
    )


def convert_date(value: date | CalendarDate) -> MayanDate:
    """Convert a date object, raising :class:`OutOfRangeError` before the epoch."""

    calendar_date = value if isinstance(value, CalendarDate) else CalendarDate.from_date(value)
    jdn = julian_day_number(calendar_date)
    return _derive(calendar_date, jdn, epoch_offset(jdn))


def convert_strict(date_string: str, *, strict: bool = False) -> MayanDate:
    """Convert ``date_string`` and propagate the reason for any failure.

    ``strict`` additionally rejects impossible months and days instead of
    letting them flow into the Julian Day formula.
    """

    return convert_date(parse_calendar_date(date_string, strict=strict))


def convert(date_string: str, *, strict: bool = False) -> MayanDate | None:
    """Convert ``date_string`` (``YYYY-MM-DD``), returning ``None`` on failure.

    Unparseable input and dates before 11 August 3114 BCE are reported the
    same way; use :func:`convert_strict` to tell them apart.
    """

    try:
        return convert_strict(date_string, strict=strict)
    except MayanDateError as exc:
        LOG.debug("Conversion rejected: %s", exc)
        return None


def from_offset(offset: int) -> MayanDate:
    """Build the full conversion for a day count since 0.0.0.0.0."""

    if offset < 0:
        raise OutOfRangeError(MAYAN_EPOCH_JDN + offset, offset)
    jdn = MAYAN_EPOCH_JDN + offset
    return _derive(calendar_date_from_julian_day(jdn), jdn, offset)


def from_long_count(long_count: LongCount) -> MayanDate:
    return from_offset(long_count.days)


def today(clock: Callable[[], date] | None = None) -> MayanDate:
    """Convert the current local date."""

    current = (clock or date.today)()
    return convert_date(current)


__all__ = [
    "MayanDate",
    "convert",
    "convert_date",
    "convert_strict",
    "from_long_count",
    "from_offset",
    "today",
]
