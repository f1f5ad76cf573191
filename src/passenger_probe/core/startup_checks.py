"""Startup validation: fail-fast on critical misconfigurations."""

from __future__ import annotations

import logging
import re
import shlex
import shutil
from typing import TYPE_CHECKING

from passenger_probe.exceptions import ConfigurationError

if TYPE_CHECKING:
    from passenger_probe.core.config import AppSettings

log = logging.getLogger(__name__)

_ASSIGNMENT = re.compile(r"[A-Za-z_][A-Za-z0-9_]*=")
# subshells, groups and other shell syntax are not checked against PATH
_PLAIN_WORD = re.compile(r"[\w./+-]+\Z")


def validate_settings(settings: AppSettings) -> None:
    """Validate settings at startup. Raises ConfigurationError on fatal misconfig."""
    _check_command(settings)
    _check_parser(settings)
    _check_threshold(settings)


def _check_command(settings: AppSettings) -> None:
    """Reject an empty status command; warn when its binary is not on PATH."""
    if settings.inspector.source != "passenger":
        return

    command = settings.inspector.command.strip()
    if not command:
        raise ConfigurationError(
            "PROBE_INSPECTOR_COMMAND is empty. "
            "Set it to a shell command that prints the request queue depth."
        )

    try:
        tokens = shlex.split(command)
    except ValueError as exc:
        raise ConfigurationError(f"PROBE_INSPECTOR_COMMAND is not valid shell syntax: {exc}") from exc

    # leading NAME=value tokens are environment assignments, not the program
    while tokens and _ASSIGNMENT.match(tokens[0]):
        tokens.pop(0)
    if not tokens or not _PLAIN_WORD.match(tokens[0]):
        return

    executable = tokens[0]
    if shutil.which(executable) is None:
        log.warning(
            "Status command %r not found on PATH. Every health check will report "
            "no capacity until it is installed.",
            executable,
        )


def _check_parser(settings: AppSettings) -> None:
    """A delimited parser needs a non-blank delimiter."""
    if settings.inspector.parser == "delimited" and not settings.inspector.delimiter.strip():
        raise ConfigurationError(
            "PROBE_INSPECTOR_DELIMITER must be a non-whitespace string when "
            "PROBE_INSPECTOR_PARSER=delimited. Use PROBE_INSPECTOR_PARSER=column "
            "for whitespace-separated output."
        )


def _check_threshold(settings: AppSettings) -> None:
    """Warn when the configured maximum leaves no headroom at all."""
    if settings.max_queue_length == 0:
        log.warning("MAX_QUEUE_LENGTH=0: the health endpoint will always report 503.")
