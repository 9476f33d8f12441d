"""Error envelope and exception handlers for the API."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from http import HTTPStatus
from typing import Any

from fastapi import FastAPI, HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from pydantic import BaseModel, Field

from ..errors import MayanDateError, OutOfRangeError, ParseError
from .schemas import JSON_INT_MAX, JSON_INT_MIN

LOG = logging.getLogger(__name__)

DATE_NOT_REPRESENTABLE = "DATE_NOT_REPRESENTABLE"


class ErrorEnvelope(BaseModel):
    """Standardized error payload returned by the API."""

    code: str = Field(description="Machine readable error code.")
    message: str = Field(description="Human friendly summary of the error.")
    details: Any | None = Field(
        default=None, description="Optional structured details that expand on the error."
    )


def _status_to_code(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).name
    except ValueError:
        return "ERROR"


def _normalize_detail(detail: Any, status_code: int) -> ErrorEnvelope:
    """Coerce an :class:`HTTPException` detail into an :class:`ErrorEnvelope`."""

    default_code = _status_to_code(status_code)
    default_message = HTTPStatus(status_code).phrase

    if isinstance(detail, ErrorEnvelope):
        return detail
    if isinstance(detail, Mapping):
        data = dict(detail)
        return ErrorEnvelope(
            code=str(data.pop("code", None) or default_code),
            message=str(data.pop("message", None) or default_message),
            details=data.pop("details", None) or (data or None),
        )
    if isinstance(detail, str):
        return ErrorEnvelope(code=default_code, message=detail)
    return ErrorEnvelope(code=default_code, message=default_message, details=detail)


def not_representable(exc: MayanDateError) -> HTTPException:
    """Map a conversion failure onto a single 422 error for consumers."""

    reason = "parse" if isinstance(exc, ParseError) else "out_of_range"
    details: dict[str, Any] = {"reason": reason, "error": str(exc)}
    if isinstance(exc, OutOfRangeError) and JSON_INT_MIN <= exc.julian_day:
        details["julianDay"] = exc.julian_day
    return _not_representable(details)


def exceeds_json_range(julian_day: int) -> HTTPException:
    """Reject results whose day counts cannot be encoded as 64-bit JSON integers."""

    return _not_representable(
        {
            "reason": "too_large",
            "error": f"Julian Day exceeds the supported maximum of {JSON_INT_MAX}",
            "julianDay": str(julian_day),
        }
    )


def _not_representable(details: dict[str, Any]) -> HTTPException:
    envelope = ErrorEnvelope(
        code=DATE_NOT_REPRESENTABLE,
        message="Select a valid date on or after 11 August 3114 BCE.",
        details=details,
    )
    return HTTPException(status_code=422, detail=envelope)


async def http_exception_handler(_: Request, exc: HTTPException) -> ORJSONResponse:
    envelope = _normalize_detail(exc.detail, exc.status_code)
    return ORJSONResponse(status_code=exc.status_code, content=envelope.model_dump())


async def validation_exception_handler(
    _: Request, exc: RequestValidationError
) -> ORJSONResponse:
    envelope = ErrorEnvelope(
        code="VALIDATION_ERROR",
        message="Request validation failed.",
        details=jsonable_encoder(exc.errors()),
    )
    return ORJSONResponse(status_code=422, content=envelope.model_dump())


async def unhandled_exception_handler(request: Request, exc: Exception) -> ORJSONResponse:
    LOG.exception("Unhandled error while serving %s", request.url.path)
    envelope = ErrorEnvelope(
        code="INTERNAL_ERROR",
        message="An unexpected error occurred while processing the request.",
        details={"type": exc.__class__.__name__},
    )
    return ORJSONResponse(status_code=500, content=envelope.model_dump())


def install_error_handlers(app: FastAPI) -> None:
    """Register the shared exception handlers on ``app``."""

    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)


__all__ = [
    "DATE_NOT_REPRESENTABLE",
    "ErrorEnvelope",
    "exceeds_json_range",
    "install_error_handlers",
    "not_representable",
]
