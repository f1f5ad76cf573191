"""CLI for passenger-probe: serve / check commands."""

from __future__ import annotations

import asyncio
from typing import Optional

import typer
import uvicorn
from rich.console import Console
from rich.table import Table

from passenger_probe.admission import HEADROOM_FACTOR, AdmissionEvaluator
from passenger_probe.api.app import create_app
from passenger_probe.core.config import AppSettings, load_settings
from passenger_probe.core.logging_config import setup_logging
from passenger_probe.core.startup_checks import validate_settings
from passenger_probe.exceptions import ConfigurationError
from passenger_probe.inspection import create_queue_source

app = typer.Typer(name="passenger-probe", help="Queue-depth health check for Passenger")
console = Console()
err_console = Console(stderr=True)


def _build_settings(host: Optional[str] = None, port: Optional[int] = None) -> AppSettings:
    """Load settings from the environment, overriding with CLI flags. Exits 1 on bad config."""
    overrides: dict = {}
    if host:
        overrides["bind_host"] = host
    if port is not None:
        overrides["server_port"] = port
    try:
        settings = load_settings(**overrides)
        validate_settings(settings)
    except ConfigurationError as exc:
        err_console.print(f"[red]Configuration error:[/red] {exc}")
        raise typer.Exit(code=1) from exc
    return settings


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Bind address (overrides BIND_HOST)"),
    port: Optional[int] = typer.Option(None, "--port", help="Listen port (overrides SERVER_PORT)"),
) -> None:
    """Run the health endpoint until interrupted."""
    settings = _build_settings(host, port)
    setup_logging(settings.observability)

    uvicorn.run(
        create_app(settings),
        host=settings.bind_host,
        port=settings.server_port,
        log_config=None,
    )


@app.command()
def check(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log inspection details"),
) -> None:
    """Inspect the queue once and print the verdict. Exit 0 when admitting, 1 otherwise."""
    settings = _build_settings()
    observability = settings.observability
    if verbose:
        observability = observability.model_copy(update={"log_level": "DEBUG"})
    setup_logging(observability)

    evaluator = AdmissionEvaluator(create_queue_source(settings), settings.max_queue_length)
    verdict = asyncio.run(evaluator.evaluate())

    table = Table(title="Queue admission")
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("Queue depth", "unavailable" if verdict.depth is None else str(verdict.depth))
    table.add_row("Max queue length", str(settings.max_queue_length))
    table.add_row("Threshold", f"{float(HEADROOM_FACTOR * settings.max_queue_length):g}")
    table.add_row("Reason", verdict.reason)
    table.add_row("Verdict", "[green]true[/green]" if verdict.admit else "[red]false[/red]")
    console.print(table)

    if not verdict.admit:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
