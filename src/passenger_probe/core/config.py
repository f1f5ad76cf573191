"""Nested pydantic-settings configuration for the probe.

Top-level settings read un-prefixed env vars (``MAX_QUEUE_LENGTH``,
``SERVER_PORT``); sub-models read their own ``PROBE_<GROUP>_*`` vars.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings

from passenger_probe.exceptions import ConfigurationError

DEFAULT_STATUS_COMMAND = "passenger-status | grep 'Requests in top-level queue'"


class InspectorConfig(BaseSettings):
    """Queue inspection configuration.

    Env vars use ``PROBE_INSPECTOR_`` prefix::

        export PROBE_INSPECTOR_TIMEOUT_SECONDS=2.5
        export PROBE_INSPECTOR_PARSER=column
    """

    model_config = {"env_prefix": "PROBE_INSPECTOR_"}

    source: str = "passenger"
    command: str = DEFAULT_STATUS_COMMAND
    timeout_seconds: float = Field(default=5.0, gt=0.0)
    parser: Literal["delimited", "column"] = "delimited"
    delimiter: str = ":"
    # None selects the parser's own default (1 for delimited, -1 for column)
    field_index: int | None = None


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Env vars use ``PROBE_OBSERVABILITY_`` prefix.
    """

    model_config = {"env_prefix": "PROBE_OBSERVABILITY_"}

    log_level: str = "INFO"
    json_logs: bool = False


class AppSettings(BaseSettings):
    """Top-level settings: admission threshold, listen address, and sub-configs."""

    max_queue_length: int = Field(default=100, ge=0)
    server_port: int = Field(default=8080, gt=0, le=65535)
    bind_host: str = "127.0.0.1"

    inspector: InspectorConfig = Field(default_factory=InspectorConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


def load_settings(**overrides: object) -> AppSettings:
    """Build settings from the environment, applying explicit overrides.

    Raises:
        ConfigurationError: If any value fails validation.
    """
    try:
        return AppSettings(**overrides)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        raise ConfigurationError(f"Invalid configuration: {problems}") from exc
