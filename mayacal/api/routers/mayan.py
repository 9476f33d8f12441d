"""Conversion endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Path, Query, Request

from ...config import Settings, default_settings
from ...constants import HAAB_MONTHS, LONG_COUNT_UNITS, MAYAN_EPOCH_JDN, TZOLKIN_NAMES
from ...converter import convert_strict, from_offset, today
from ...errors import MayanDateError
from ..errors import exceeds_json_range, not_representable
from ..schemas import (
    JSON_INT_MAX,
    MAX_OFFSET,
    CalendarTablesResponse,
    LongCountUnitModel,
    MayanDateResponse,
)

router = APIRouter(prefix="/v1/mayan", tags=["mayan"])


def _domain_settings(request: Request) -> Settings:
    return getattr(request.app.state, "settings", None) or default_settings()


@router.get(
    "/convert",
    response_model=MayanDateResponse,
    summary="Convert a Gregorian date",
    description=(
        "Return the Long Count, Tzolkʼin and Haab for a proleptic Gregorian date. "
        "Unparseable dates and dates before 11 August 3114 BCE both yield "
        "DATE_NOT_REPRESENTABLE."
    ),
)
def convert_endpoint(
    date: str = Query(..., description="Date as YYYY-MM-DD (astronomical year or BCE suffix)."),
    strict: bool | None = Query(
        None, description="Reject impossible months/days; defaults to the configured mode."
    ),
    settings: Settings = Depends(_domain_settings),
) -> MayanDateResponse:
    use_strict = settings.conversion.strict if strict is None else strict
    try:
        result = convert_strict(date, strict=use_strict)
    except MayanDateError as exc:
        raise not_representable(exc) from exc
    if result.julian_day > JSON_INT_MAX:
        raise exceeds_json_range(result.julian_day)
    return MayanDateResponse.from_result(result)


@router.get("/today", response_model=MayanDateResponse, summary="Convert today's date")
def today_endpoint() -> MayanDateResponse:
    return MayanDateResponse.from_result(today())


@router.get(
    "/offset/{offset}",
    response_model=MayanDateResponse,
    summary="Resolve a day count since 0.0.0.0.0",
)
def offset_endpoint(
    offset: int = Path(
        ..., ge=0, le=MAX_OFFSET, description="Days elapsed since the Mayan epoch."
    ),
) -> MayanDateResponse:
    return MayanDateResponse.from_result(from_offset(offset))


@router.get("/tables", response_model=CalendarTablesResponse, summary="Reference tables")
def tables_endpoint() -> CalendarTablesResponse:
    return CalendarTablesResponse(
        epoch_julian_day=MAYAN_EPOCH_JDN,
        long_count_units=[
            LongCountUnitModel(name=unit.name, days=unit.days) for unit in LONG_COUNT_UNITS
        ],
        tzolkin_names=list(TZOLKIN_NAMES),
        haab_months=list(HAAB_MONTHS),
    )


__all__ = ["router"]
