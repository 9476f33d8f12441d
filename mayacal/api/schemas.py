"""Response models for the conversion API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ..constants import MAYAN_EPOCH_JDN
from ..converter import MayanDate

# orjson only encodes signed 64-bit integers.
JSON_INT_MIN = -(2**63)
JSON_INT_MAX = 2**63 - 1
MAX_OFFSET = JSON_INT_MAX - MAYAN_EPOCH_JDN


class LongCountModel(BaseModel):
    baktun: int = Field(ge=0)
    katun: int = Field(ge=0, le=19)
    tun: int = Field(ge=0, le=19)
    uinal: int = Field(ge=0, le=17)
    kin: int = Field(ge=0, le=19)
    label: str


class TzolkinModel(BaseModel):
    number: int = Field(ge=1, le=13)
    name: str
    label: str


class HaabModel(BaseModel):
    day: int = Field(ge=0, le=19)
    month: str
    label: str


class MayanDateResponse(BaseModel):
    """Full conversion of a single Gregorian date."""

    model_config = ConfigDict(populate_by_name=True)

    date: str = Field(description="Proleptic Gregorian date, astronomical year numbering.")
    julian_day: int = Field(alias="julianDay")
    offset: int = Field(ge=0, description="Days elapsed since 0.0.0.0.0.")
    long_count: LongCountModel = Field(alias="longCount")
    tzolkin: TzolkinModel
    haab: HaabModel

    @classmethod
    def from_result(cls, result: MayanDate) -> "MayanDateResponse":
        return cls.model_validate(result.to_dict())


class LongCountUnitModel(BaseModel):
    name: str
    days: int


class CalendarTablesResponse(BaseModel):
    """Reference tables used by the converter."""

    model_config = ConfigDict(populate_by_name=True)

    epoch_julian_day: int = Field(alias="epochJulianDay")
    long_count_units: list[LongCountUnitModel] = Field(alias="longCountUnits")
    tzolkin_names: list[str] = Field(alias="tzolkinNames")
    haab_months: list[str] = Field(alias="haabMonths")


__all__ = [
    "JSON_INT_MAX",
    "JSON_INT_MIN",
    "MAX_OFFSET",
    "CalendarTablesResponse",
    "HaabModel",
    "LongCountModel",
    "LongCountUnitModel",
    "MayanDateResponse",
    "TzolkinModel",
]
