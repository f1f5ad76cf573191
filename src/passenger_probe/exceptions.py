"""Exception hierarchy for passenger-probe."""

from __future__ import annotations


class ProbeError(Exception):
    """Base exception for all passenger-probe errors."""


class ConfigurationError(ProbeError):
    """Raised when settings are invalid or unparseable at startup."""


class InspectError(ProbeError):
    """Raised when the queue depth could not be observed."""


class InspectTimeoutError(InspectError):
    """The status command exceeded the allotted wait."""


class CommandFailedError(InspectError):
    """The status command exited non-zero or could not be spawned."""

    def __init__(self, message: str, returncode: int | None = None, stderr: str = "") -> None:
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr


class ParseFailedError(InspectError):
    """Status output did not match the expected ``label : integer`` shape.

    A negative depth also raises this error. Queue depth cannot be negative,
    so such output is treated as unreadable and the check rejects.
    """

    def __init__(self, message: str, raw_output: str = "") -> None:
        super().__init__(message)
        self.raw_output = raw_output


__all__ = [
    "ProbeError",
    "ConfigurationError",
    "InspectError",
    "InspectTimeoutError",
    "CommandFailedError",
    "ParseFailedError",
]
