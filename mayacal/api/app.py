"""FastAPI application factory used by ASGI servers and the CLI."""

from __future__ import annotations

import logging

import yaml
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse
from pydantic import ValidationError

from .. import __version__
from ..boot.logging import configure_logging
from ..config import Settings, default_settings, load_settings
from .errors import install_error_handlers
from .routers import health as health_router
from .routers import mayan as mayan_router
from .settings import APISettings, get_settings

LOGGER = logging.getLogger(__name__)

configure_logging()

_APP_INSTANCE: FastAPI | None = None


def _load_domain_settings() -> Settings:
    try:
        return load_settings()
    except (OSError, yaml.YAMLError, ValidationError) as exc:
        LOGGER.warning("Failed to load persisted settings; using defaults: %s", exc)
        return default_settings()


def _configure_cors(app: FastAPI, api_settings: APISettings) -> None:
    if not api_settings.cors_origins:
        return
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(api_settings.cors_origins),
        allow_methods=["GET"],
        allow_headers=["*"],
    )


def _prime_settings(app: FastAPI) -> None:
    @app.on_event("startup")
    def _prime() -> None:
        app.state.settings = _load_domain_settings()


def create_app(api_settings: APISettings | None = None) -> FastAPI:
    """Instantiate and configure the FastAPI application."""

    resolved = api_settings or get_settings()
    app = FastAPI(
        title="mayacal API",
        version=__version__,
        default_response_class=ORJSONResponse,
        openapi_tags=[
            {"name": "system", "description": "Service level operations."},
            {"name": "mayan", "description": "Long Count, Tzolkʼin and Haab conversion."},
        ],
    )
    app.state.api_settings = resolved

    _configure_cors(app, resolved)
    install_error_handlers(app)
    app.include_router(health_router.router)
    app.include_router(mayan_router.router)
    _prime_settings(app)
    return app


def get_app() -> FastAPI:
    global _APP_INSTANCE
    if _APP_INSTANCE is None:
        _APP_INSTANCE = create_app()
    return _APP_INSTANCE


app = get_app()


__all__ = ["app", "create_app", "get_app"]
