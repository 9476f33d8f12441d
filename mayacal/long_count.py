"""Epoch offsets and the Long Count."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .constants import LONG_COUNT_UNITS, MAYAN_EPOCH_JDN
from .errors import OutOfRangeError, ParseError

_BAKTUN, _KATUN, _TUN, _UINAL, _KIN = (unit.days for unit in LONG_COUNT_UNITS)

# Upper bound (exclusive) of every place below baktun.
_PLACE_LIMITS = {"katun": 20, "tun": 20, "uinal": 18, "kin": 20}


@dataclass(frozen=True)
class LongCount:
    """Mixed-radix count of days elapsed since 0.0.0.0.0."""

    baktun: int
    katun: int
    tun: int
    uinal: int
    kin: int

    @property
    def days(self) -> int:
        """Return the epoch offset this Long Count represents."""

        return (
            self.baktun * _BAKTUN
            + self.katun * _KATUN
            + self.tun * _TUN
            + self.uinal * _UINAL
            + self.kin * _KIN
        )

    def places(self) -> tuple[int, int, int, int, int]:
        return (self.baktun, self.katun, self.tun, self.uinal, self.kin)

    def units(self) -> Iterator[tuple[str, int, int]]:
        """Yield ``(unit, days per unit, value)`` from baktun down to kin."""

        for unit, value in zip(LONG_COUNT_UNITS, self.places()):
            yield unit.name, unit.days, value

    def label(self) -> str:
        """Return the dotted notation (e.g., ``13.0.0.0.0``)."""

        return ".".join(str(value) for value in self.places())

    def __str__(self) -> str:
        return self.label()


def epoch_offset(jdn: int) -> int:
    """Return the days elapsed between the Mayan epoch and ``jdn``.

    Raises :class:`~mayacal.errors.OutOfRangeError` for dates before the
    epoch; this is the only range check in the pipeline.
    """

    offset = jdn - MAYAN_EPOCH_JDN
    if offset < 0:
        raise OutOfRangeError(jdn, offset)
    return offset


def long_count_from_offset(offset: int) -> LongCount:
    """Decompose a non-negative epoch offset into Long Count places."""

    return LongCount(
        baktun=offset // _BAKTUN,
        katun=(offset % _BAKTUN) // _KATUN,
        tun=(offset % _KATUN) // _TUN,
        uinal=(offset % _TUN) // _UINAL,
        kin=offset % _UINAL,
    )


def parse_long_count(value: str) -> LongCount:
    """Build a :class:`LongCount` from dotted notation such as ``9.12.11.5.18``."""

    parts = value.strip().split(".")
    if len(parts) != len(LONG_COUNT_UNITS) or not all(p.isdecimal() for p in parts):
        raise ParseError(value, "expected five dot-separated non-negative integers")

    long_count = LongCount(*(int(part) for part in parts))
    for name, limit in _PLACE_LIMITS.items():
        place = getattr(long_count, name)
        if place >= limit:
            raise ParseError(value, f"{name} {place} must be below {limit}")
    return long_count


__all__ = ["LongCount", "epoch_offset", "long_count_from_offset", "parse_long_count"]
