"""``serve`` subcommand: run the HTTP API under Uvicorn."""

from __future__ import annotations

import argparse


def add_subparser(sub: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = sub.add_parser("serve", help="Run the conversion API")
    parser.add_argument("--host", help="Bind address (default from MAYACAL_API_HOST)")
    parser.add_argument("--port", type=int, help="Port (default from MAYACAL_API_PORT)")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    parser.set_defaults(func=run)


def run(args: argparse.Namespace) -> int:  # pragma: no cover - starts a server
    import uvicorn

    from ..api.settings import get_settings

    api_settings = get_settings()
    uvicorn.run(
        "mayacal.api.app:app",
        host=args.host or api_settings.host,
        port=args.port or api_settings.port,
        log_level=api_settings.log_level,
        reload=args.reload or api_settings.reload,
    )
    return 0
