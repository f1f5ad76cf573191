"""Shared fixtures for passenger-probe tests."""

from __future__ import annotations

import pytest

from passenger_probe.core.config import AppSettings, InspectorConfig

_ENV_VARS = (
    "MAX_QUEUE_LENGTH",
    "SERVER_PORT",
    "BIND_HOST",
    "PROBE_INSPECTOR_SOURCE",
    "PROBE_INSPECTOR_COMMAND",
    "PROBE_INSPECTOR_TIMEOUT_SECONDS",
    "PROBE_INSPECTOR_PARSER",
    "PROBE_INSPECTOR_DELIMITER",
    "PROBE_INSPECTOR_FIELD_INDEX",
    "PROBE_OBSERVABILITY_LOG_LEVEL",
    "PROBE_OBSERVABILITY_JSON_LOGS",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host environment overrides out of every test."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings() -> AppSettings:
    """Default settings with a status command that always reports depth 3."""
    return AppSettings(
        inspector=InspectorConfig(command="echo 'Requests in top-level queue : 3'"),
    )
