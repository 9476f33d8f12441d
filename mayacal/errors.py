"""Exceptions raised by the conversion pipeline."""

from __future__ import annotations


class MayanDateError(ValueError):
    """Base class for dates that cannot be expressed in the Mayan calendars."""


class ParseError(MayanDateError):
    """Raised when a date string has missing or non-numeric components."""

    def __init__(self, value: str, reason: str = "expected YYYY-MM-DD") -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Cannot parse {value!r}: {reason}")


class OutOfRangeError(MayanDateError):
    """Raised when a date falls before the Long Count epoch."""

    def __init__(self, julian_day: int, offset: int) -> None:
        self.julian_day = julian_day
        self.offset = offset
        super().__init__(
            f"JDN {julian_day} lies {-offset} day(s) before the Mayan epoch"
        )


__all__ = ["MayanDateError", "OutOfRangeError", "ParseError"]
