"""Queue source and output parser protocols."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class IQueueSource(Protocol):
    """Protocol for anything that can report the current request queue depth.

    The built-in implementation shells out to ``passenger-status``; tests
    inject a canned fake.
    """

    async def inspect(self) -> int:
        """Observe the queue once.

        Returns:
            Current queue depth (non-negative).

        Raises:
            InspectError: On timeout, command failure or unparseable output.
        """
        ...


@runtime_checkable
class IOutputParser(Protocol):
    """Protocol for turning status-command output into a queue depth."""

    def parse(self, output: str) -> int:
        """Extract the queue depth. Raises ParseFailedError on mismatch."""
        ...
