"""FastAPI application with lifespan management."""

from __future__ import annotations

import importlib.metadata
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from passenger_probe.admission import AdmissionEvaluator
from passenger_probe.api.middleware.error_handler import register_error_handlers
from passenger_probe.api.routes import health
from passenger_probe.core.config import AppSettings, load_settings
from passenger_probe.core.logging_config import setup_logging
from passenger_probe.core.startup_checks import validate_settings
from passenger_probe.inspection import IQueueSource, create_queue_source

log = logging.getLogger(__name__)


def _get_version() -> str:
    """Read package version from installed metadata, with dev fallback."""
    try:
        return importlib.metadata.version("passenger-probe")
    except importlib.metadata.PackageNotFoundError:
        return "0.0.0-dev"


def create_app(
    settings: AppSettings | None = None,
    queue_source: IQueueSource | None = None,
) -> FastAPI:
    """Build the app.

    Args:
        settings: Pre-loaded settings. When ``None`` the lifespan loads them
            from the environment, validates them and configures logging.
        queue_source: Source to inject instead of the one built from
            ``settings.inspector``.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        resolved = settings
        if resolved is None:
            resolved = load_settings()
            validate_settings(resolved)
            setup_logging(resolved.observability)

        source = queue_source if queue_source is not None else create_queue_source(resolved)

        app.state.settings = resolved
        app.state.evaluator = AdmissionEvaluator(source, resolved.max_queue_length)
        log.info(
            "Health endpoint ready (max_queue_length=%d, source=%s)",
            resolved.max_queue_length,
            type(source).__name__,
        )
        yield

    app = FastAPI(
        title="passenger-probe",
        description="Reports whether the backing application server can take more traffic.",
        version=_get_version(),
        lifespan=lifespan,
    )
    register_error_handlers(app)
    app.include_router(health.router)
    return app


app = create_app()
