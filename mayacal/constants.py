"""Lookup tables and fixed quantities for the Mesoamerican calendars."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

# Goodman-Martinez-Thompson correlation: JDN of 0.0.0.0.0 (11 August 3114 BCE).
MAYAN_EPOCH_JDN: Final[int] = 584283

TZOLKIN_NAMES: Final[tuple[str, ...]] = (
    "Imix",
    "Ikʼ",
    "Akʼbʼal",
    "Kʼan",
    "Chikchan",
    "Kimi",
    "Manikʼ",
    "Lamat",
    "Muluk",
    "Ok",
    "Chuwen",
    "Ebʼ",
    "Bʼen",
    "Ix",
    "Men",
    "Kibʼ",
    "Kabʼan",
    "Etzʼnabʼ",
    "Kawak",
    "Ajaw",
)

HAAB_MONTHS: Final[tuple[str, ...]] = (
    "Pop",
    "Woʼ",
    "Sip",
    "Sotzʼ",
    "Sek",
    "Xul",
    "Yaxkʼinʼ",
    "Mol",
    "Chʼen",
    "Yax",
    "Sakʼ",
    "Keh",
    "Mak",
    "Kʼankʼin",
    "Muwan",
    "Pax",
    "Kʼayabʼ",
    "Kumkʼu",
    "Wayebʼ",
)

WAYEB_INDEX: Final[int] = len(HAAB_MONTHS) - 1

TZOLKIN_NUMBERS: Final[int] = 13
TZOLKIN_CYCLE_LENGTH: Final[int] = 260
HAAB_MONTH_LENGTH: Final[int] = 20
HAAB_CYCLE_LENGTH: Final[int] = 365
# First Haab day index that falls in Wayebʼ (18 months x 20 days).
HAAB_WAYEB_START: Final[int] = WAYEB_INDEX * HAAB_MONTH_LENGTH

# Calibration so that offset 0 lands on 4 Ajaw 8 Kumkʼu.
TZOLKIN_NUMBER_SHIFT: Final[int] = 3
TZOLKIN_NAME_SHIFT: Final[int] = 19
HAAB_SHIFT: Final[int] = 348


@dataclass(frozen=True)
class LongCountUnit:
    """One place of the Long Count and the number of days it spans."""

    name: str
    days: int


LONG_COUNT_UNITS: Final[tuple[LongCountUnit, ...]] = (
    LongCountUnit("baktun", 144_000),
    LongCountUnit("katun", 7_200),
    LongCountUnit("tun", 360),
    LongCountUnit("uinal", 20),
    LongCountUnit("kin", 1),
)


def tzolkin_name_for_index(index: int) -> str:
    """Return the Tzolkʼin day name for ``index`` (0-19)."""

    return TZOLKIN_NAMES[index % len(TZOLKIN_NAMES)]


def haab_month_for_index(index: int) -> str:
    """Return the Haab month name for ``index`` (0-18)."""

    return HAAB_MONTHS[index % len(HAAB_MONTHS)]


__all__ = [
    "HAAB_CYCLE_LENGTH",
    "HAAB_MONTHS",
    "HAAB_MONTH_LENGTH",
    "HAAB_SHIFT",
    "HAAB_WAYEB_START",
    "LONG_COUNT_UNITS",
    "LongCountUnit",
    "MAYAN_EPOCH_JDN",
    "TZOLKIN_CYCLE_LENGTH",
    "TZOLKIN_NAMES",
    "TZOLKIN_NAME_SHIFT",
    "TZOLKIN_NUMBERS",
    "TZOLKIN_NUMBER_SHIFT",
    "WAYEB_INDEX",
    "haab_month_for_index",
    "tzolkin_name_for_index",
]
