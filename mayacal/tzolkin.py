"""The 260-day Tzolkʼin count."""

from __future__ import annotations

from dataclasses import dataclass

from .constants import (
    TZOLKIN_NAMES,
    TZOLKIN_NAME_SHIFT,
    TZOLKIN_NUMBERS,
    TZOLKIN_NUMBER_SHIFT,
    tzolkin_name_for_index,
)


@dataclass(frozen=True)
class Tzolkin:
    """Pairing of a day number (1-13) with one of the twenty day names."""

    number: int
    name: str

    @property
    def name_index(self) -> int:
        return TZOLKIN_NAMES.index(self.name)

    def label(self) -> str:
        """Return the conventional label (e.g., ``4 Ajaw``)."""

        return f"{self.number} {self.name}"

    def __str__(self) -> str:
        return self.label()


def tzolkin_from_offset(offset: int) -> Tzolkin:
    """Return the Tzolkʼin position for an epoch offset (0 -> 4 Ajaw)."""

    number = (offset + TZOLKIN_NUMBER_SHIFT) % TZOLKIN_NUMBERS + 1
    return Tzolkin(number=number, name=tzolkin_name_for_index(offset + TZOLKIN_NAME_SHIFT))


__all__ = ["Tzolkin", "tzolkin_from_offset"]
