"""Long Count, Tzolkʼin and Haab derivations from epoch offsets."""

from __future__ import annotations

import pytest

from mayacal.constants import (
    HAAB_MONTHS,
    MAYAN_EPOCH_JDN,
    TZOLKIN_NAMES,
    haab_month_for_index,
    tzolkin_name_for_index,
)
from mayacal.errors import OutOfRangeError, ParseError
from mayacal.haab import Haab, haab_from_offset
from mayacal.long_count import (
    LongCount,
    epoch_offset,
    long_count_from_offset,
    parse_long_count,
)
from mayacal.tzolkin import Tzolkin, tzolkin_from_offset


def test_name_tables_have_expected_shape() -> None:
    assert len(TZOLKIN_NAMES) == 20
    assert len(HAAB_MONTHS) == 19
    assert TZOLKIN_NAMES[0] == "Imix" and TZOLKIN_NAMES[-1] == "Ajaw"
    assert HAAB_MONTHS[17] == "Kumkʼu" and HAAB_MONTHS[18] == "Wayebʼ"


def test_index_helpers_wrap_around() -> None:
    assert tzolkin_name_for_index(19) == "Ajaw"
    assert tzolkin_name_for_index(20) == "Imix"
    assert haab_month_for_index(18) == "Wayebʼ"
    assert haab_month_for_index(19) == "Pop"


def test_epoch_offset_is_zero_at_epoch() -> None:
    assert epoch_offset(MAYAN_EPOCH_JDN) == 0
    assert epoch_offset(MAYAN_EPOCH_JDN + 10) == 10


def test_epoch_offset_rejects_earlier_days() -> None:
    with pytest.raises(OutOfRangeError) as excinfo:
        epoch_offset(MAYAN_EPOCH_JDN - 1)
    assert excinfo.value.offset == -1
    assert excinfo.value.julian_day == MAYAN_EPOCH_JDN - 1


def test_offset_zero_is_creation_date() -> None:
    assert long_count_from_offset(0) == LongCount(0, 0, 0, 0, 0)
    assert tzolkin_from_offset(0) == Tzolkin(4, "Ajaw")
    assert haab_from_offset(0) == Haab(8, "Kumkʼu")


def test_offset_one_advances_every_count() -> None:
    assert long_count_from_offset(1).label() == "0.0.0.0.1"
    # The name index wraps from Ajaw back to the start of the table.
    assert tzolkin_from_offset(1) == Tzolkin(5, "Imix")
    assert haab_from_offset(1) == Haab(9, "Kumkʼu")


@pytest.mark.parametrize(
    ("offset", "label"),
    [
        (19, "0.0.0.0.19"),
        (20, "0.0.0.1.0"),
        (359, "0.0.0.17.19"),
        (360, "0.0.1.0.0"),
        (7_199, "0.0.19.17.19"),
        (7_200, "0.1.0.0.0"),
        (144_000, "1.0.0.0.0"),
        (1_872_000, "13.0.0.0.0"),
        (20 * 144_000, "20.0.0.0.0"),
    ],
)
def test_long_count_place_boundaries(offset: int, label: str) -> None:
    long_count = long_count_from_offset(offset)
    assert long_count.label() == label
    assert long_count.days == offset


def test_long_count_units_listing() -> None:
    rows = list(long_count_from_offset(1_876_028).units())
    assert rows == [
        ("baktun", 144_000, 13),
        ("katun", 7_200, 0),
        ("tun", 360, 11),
        ("uinal", 20, 3),
        ("kin", 1, 8),
    ]


def test_parse_long_count() -> None:
    assert parse_long_count("9.12.11.5.18") == LongCount(9, 12, 11, 5, 18)
    assert parse_long_count(" 13.0.0.0.0 ").days == 1_872_000


@pytest.mark.parametrize(
    "text", ["13.0.0.0", "13.0.0.0.0.0", "a.b.c.d.e", "0.0.0.18.0", "0.20.0.0.0", "².0.0.0.0"]
)
def test_parse_long_count_rejects_malformed(text: str) -> None:
    with pytest.raises(ParseError):
        parse_long_count(text)


def test_tzolkin_first_cycle_walks_both_wheels() -> None:
    labels = [tzolkin_from_offset(offset).label() for offset in range(3)]
    assert labels == ["4 Ajaw", "5 Imix", "6 Ikʼ"]
    assert tzolkin_from_offset(9).number == 13
    assert tzolkin_from_offset(10).number == 1


def test_tzolkin_name_index() -> None:
    assert Tzolkin(4, "Ajaw").name_index == 19


@pytest.mark.parametrize(
    ("offset", "expected"),
    [
        (11, Haab(19, "Kumkʼu")),
        (12, Haab(0, "Wayebʼ")),
        (16, Haab(4, "Wayebʼ")),
        (17, Haab(0, "Pop")),
        (37, Haab(0, "Woʼ")),
    ],
)
def test_haab_month_transitions(offset: int, expected: Haab) -> None:
    assert haab_from_offset(offset) == expected


def test_wayeb_only_has_five_days() -> None:
    wayeb_days = [
        haab_from_offset(offset).day
        for offset in range(365)
        if haab_from_offset(offset).is_wayeb
    ]
    assert sorted(wayeb_days) == [0, 1, 2, 3, 4]


def test_haab_month_index() -> None:
    assert Haab(3, "Kʼankʼin").month_index == 13
    assert not Haab(3, "Kʼankʼin").is_wayeb
