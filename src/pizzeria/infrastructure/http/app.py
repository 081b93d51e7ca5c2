"""
app.py — FastAPI Entry Point for the Pizzeria API

Serves the same routes as the Lambda handler from a long-running process.
A single catch-all route hands method, path and raw body to the Router and
returns its envelope as the HTTP response, so both entry points behave
identically, 404s included.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, Response
from starlette.concurrency import run_in_threadpool

from pizzeria.infrastructure import bootstrap
from pizzeria.infrastructure.config import get_settings
from pizzeria.infrastructure.http.router import Router
from pizzeria.infrastructure.logging_config import setup_logging

log = logging.getLogger(__name__)

METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def create_app(router: Router | None = None) -> FastAPI:
    """
    Builds the FastAPI application.

    Args:
        router (Router | None): Router to dispatch to. Defaults to the one from
            the composition root, which initializes the order store once here.

    Returns:
        FastAPI: The configured application.
    """
    settings = get_settings()
    if router is None:
        setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)
        router = bootstrap.router()

    app = FastAPI(title="Pizzeria API")

    @app.api_route("/{full_path:path}", methods=METHODS)
    async def dispatch(request: Request) -> Response:
        body = await request.body()
        result = await run_in_threadpool(
            router.dispatch, request.method, request.url.path, body or None
        )
        return Response(
            content=result.body,
            status_code=result.status_code,
            media_type="application/json",
        )

    log.info("%s ready", settings.SERVICE_NAME)
    return app
