from __future__ import annotations

import pytest

from mayacal.constants import HAAB_CYCLE_LENGTH, MAYAN_EPOCH_JDN, TZOLKIN_CYCLE_LENGTH
from mayacal.converter import convert, from_offset
from mayacal.gregorian import (
    CalendarDate,
    calendar_date_from_julian_day,
    julian_day_number,
)
from mayacal.haab import haab_from_offset
from mayacal.long_count import epoch_offset, long_count_from_offset
from mayacal.tzolkin import tzolkin_from_offset

hypothesis = pytest.importorskip("hypothesis")
given = hypothesis.given
st = hypothesis.strategies
settings = hypothesis.settings

OFFSETS = st.integers(min_value=0, max_value=10_000_000)
JDNS = st.integers(min_value=MAYAN_EPOCH_JDN, max_value=MAYAN_EPOCH_JDN + 5_000_000)


@settings(deadline=None)
@given(offset=OFFSETS)
def test_long_count_round_trips_offset(offset: int) -> None:
    long_count = long_count_from_offset(offset)
    assert long_count.days == offset
    assert 0 <= long_count.kin <= 19
    assert 0 <= long_count.uinal <= 17
    assert 0 <= long_count.tun <= 19
    assert 0 <= long_count.katun <= 19


@settings(deadline=None)
@given(offset=OFFSETS)
def test_tzolkin_cycles(offset: int) -> None:
    here = tzolkin_from_offset(offset)
    assert 1 <= here.number <= 13
    assert tzolkin_from_offset(offset + 13).number == here.number
    assert tzolkin_from_offset(offset + 20).name == here.name
    assert tzolkin_from_offset(offset + TZOLKIN_CYCLE_LENGTH) == here


@settings(deadline=None)
@given(offset=OFFSETS)
def test_haab_cycles(offset: int) -> None:
    here = haab_from_offset(offset)
    assert haab_from_offset(offset + HAAB_CYCLE_LENGTH) == here
    limit = 4 if here.is_wayeb else 19
    assert 0 <= here.day <= limit


@settings(deadline=None)
@given(jdn=JDNS)
def test_gregorian_round_trip_through_julian_day(jdn: int) -> None:
    calendar_date = calendar_date_from_julian_day(jdn)
    assert julian_day_number(calendar_date) == jdn


@settings(deadline=None)
@given(jdn=JDNS)
def test_conversion_is_consistent_with_offset(jdn: int) -> None:
    iso = calendar_date_from_julian_day(jdn).isoformat()
    result = convert(iso)
    assert result is not None
    assert result.julian_day == jdn
    assert result.offset == jdn - MAYAN_EPOCH_JDN == epoch_offset(jdn)
    assert result == from_offset(result.offset)


@settings(deadline=None)
@given(jdn=JDNS)
def test_julian_day_is_monotonic(jdn: int) -> None:
    current = calendar_date_from_julian_day(jdn)
    following = calendar_date_from_julian_day(jdn + 1)
    assert julian_day_number(following) - julian_day_number(current) == 1


@settings(deadline=None)
@given(days=st.integers(min_value=1, max_value=1_000_000))
def test_dates_before_epoch_fail(days: int) -> None:
    earlier = calendar_date_from_julian_day(MAYAN_EPOCH_JDN - days)
    assert convert(earlier.isoformat()) is None


def test_epoch_is_first_representable_day() -> None:
    epoch = CalendarDate(-3113, 8, 11)
    assert convert(epoch.isoformat()) is not None
