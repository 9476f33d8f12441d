"""The 365-day Haab count: eighteen 20-day months plus the five days of Wayebʼ."""

from __future__ import annotations

from dataclasses import dataclass

from .constants import (
    HAAB_CYCLE_LENGTH,
    HAAB_MONTHS,
    HAAB_MONTH_LENGTH,
    HAAB_SHIFT,
    HAAB_WAYEB_START,
    WAYEB_INDEX,
    haab_month_for_index,
)


@dataclass(frozen=True)
class Haab:
    """Day-of-month (0-19, or 0-4 in Wayebʼ) and month name."""

    day: int
    month: str

    @property
    def month_index(self) -> int:
        return HAAB_MONTHS.index(self.month)

    @property
    def is_wayeb(self) -> bool:
        return self.month_index == WAYEB_INDEX

    def label(self) -> str:
        """Return the conventional label (e.g., ``8 Kumkʼu``)."""

        return f"{self.day} {self.month}"

    def __str__(self) -> str:
        return self.label()


def haab_from_offset(offset: int) -> Haab:
    """Return the Haab position for an epoch offset (0 -> 8 Kumkʼu)."""

    haab_day = (offset + HAAB_SHIFT) % HAAB_CYCLE_LENGTH
    if haab_day >= HAAB_WAYEB_START:
        return Haab(day=haab_day - HAAB_WAYEB_START, month=haab_month_for_index(WAYEB_INDEX))

    month_index, day = divmod(haab_day, HAAB_MONTH_LENGTH)
    return Haab(day=day, month=haab_month_for_index(month_index))


__all__ = ["Haab", "haab_from_offset"]
