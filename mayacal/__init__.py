"""Gregorian to Mesoamerican (Long Count, Tzolkʼin, Haab) date conversion."""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version as _get_version

LOG = logging.getLogger(__name__)

try:
    __version__ = _get_version("mayacal")
except PackageNotFoundError:  # pragma: no cover - running from a source checkout
    __version__ = "0.0.0"

from .constants import HAAB_MONTHS, MAYAN_EPOCH_JDN, TZOLKIN_NAMES
from .converter import (
    MayanDate,
    convert,
    convert_date,
    convert_strict,
    from_long_count,
    from_offset,
    today,
)
from .errors import MayanDateError, OutOfRangeError, ParseError
from .gregorian import CalendarDate, julian_day_number, parse_calendar_date
from .haab import Haab, haab_from_offset
from .long_count import LongCount, epoch_offset, long_count_from_offset, parse_long_count
from .tzolkin import Tzolkin, tzolkin_from_offset


__all__ = [
    "__version__",
    "CalendarDate",
    "HAAB_MONTHS",
    "Haab",
    "LongCount",
    "MAYAN_EPOCH_JDN",
    "MayanDate",
    "MayanDateError",
    "OutOfRangeError",
    "ParseError",
    "TZOLKIN_NAMES",
    "Tzolkin",
    "convert",
    "convert_date",
    "convert_strict",
    "epoch_offset",
    "from_long_count",
    "from_offset",
    "haab_from_offset",
    "julian_day_number",
    "long_count_from_offset",
    "parse_calendar_date",
    "parse_long_count",
    "today",
    "tzolkin_from_offset",
]
