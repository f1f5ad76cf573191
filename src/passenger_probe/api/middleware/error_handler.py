"""Global exception handlers: any stray error reads as "no capacity"."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from passenger_probe.exceptions import ProbeError

log = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Map every error to 503 ``false`` without leaking detail to the client."""

    @app.exception_handler(ProbeError)
    async def handle_probe_error(request: Request, exc: ProbeError) -> PlainTextResponse:
        log.error("Unhandled %s on %s: %s", type(exc).__name__, request.url.path, exc)
        return PlainTextResponse("false", status_code=503)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> PlainTextResponse:
        log.exception("Unexpected %s on %s", type(exc).__name__, request.url.path)
        return PlainTextResponse("false", status_code=503)
