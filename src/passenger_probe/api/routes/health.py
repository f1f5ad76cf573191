"""Health check endpoint consumed by load balancer probes."""

from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_class=PlainTextResponse)
async def health(request: Request) -> PlainTextResponse:
    """200 ``true`` while the backing server has queue headroom, else 503 ``false``."""
    verdict = await request.app.state.evaluator.evaluate()
    return PlainTextResponse(verdict.body, status_code=verdict.status_code)
