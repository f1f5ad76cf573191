"""Queue source factory: resolves the source from config."""

from __future__ import annotations

import importlib
import logging
from typing import TYPE_CHECKING, Any

from passenger_probe.exceptions import ConfigurationError
from passenger_probe.inspection.parsers import create_parser
from passenger_probe.inspection.passenger import PassengerStatusSource
from passenger_probe.inspection.protocols import IQueueSource

if TYPE_CHECKING:
    from passenger_probe.core.config import AppSettings

log = logging.getLogger(__name__)


def _import_dotted_path(spec: str) -> Any:
    """Import ``package.module:attr`` and return the attribute."""
    module_path, sep, attr = spec.partition(":")
    if not sep or not module_path or not attr:
        raise ConfigurationError(f"Queue source {spec!r} must look like 'package.module:ClassName'")
    try:
        module = importlib.import_module(module_path)
    except ImportError as exc:
        raise ConfigurationError(f"Cannot import queue source module {module_path!r}: {exc}") from exc
    try:
        return getattr(module, attr)
    except AttributeError:
        raise ConfigurationError(f"Module {module_path!r} has no attribute {attr!r}") from None


def create_queue_source(settings: AppSettings) -> IQueueSource:
    """Create a queue source based on settings.

    When ``settings.inspector.source`` is ``"passenger"``, returns the
    built-in :class:`PassengerStatusSource` running ``inspector.command``.

    When it's a dotted path like ``mypackage.sources:SidekiqSource``,
    imports and instantiates the external class, passing ``settings`` to
    the constructor.

    Raises:
        ConfigurationError: If the dotted path cannot be resolved or the
            resolved object is not callable.
    """
    source_spec = settings.inspector.source

    if source_spec == "passenger":
        log.info("Using built-in PassengerStatusSource")
        return PassengerStatusSource(
            settings.inspector.command,
            timeout_seconds=settings.inspector.timeout_seconds,
            parser=create_parser(settings.inspector),
        )

    log.info("Loading external queue source: %s", source_spec)
    cls = _import_dotted_path(source_spec)

    if not callable(cls):
        raise ConfigurationError(
            f"Queue source {source_spec!r} resolved to {cls!r}, which is not callable"
        )

    return cls(settings)
