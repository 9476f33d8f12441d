"""Service health endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from ... import __version__

router = APIRouter(tags=["system"])


@router.get(
    "/healthz",
    summary="Service readiness check",
    response_model=dict[str, str],
)
async def health_check() -> dict[str, str]:
    return {"status": "ok", "version": __version__}


__all__ = ["router"]
