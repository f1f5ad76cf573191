"""Subprocess-backed queue source for Passenger's status tool."""

from __future__ import annotations

import asyncio
import logging
import os
import signal

from passenger_probe.exceptions import CommandFailedError, InspectTimeoutError
from passenger_probe.inspection.parsers import DelimitedFieldParser
from passenger_probe.inspection.protocols import IOutputParser

log = logging.getLogger(__name__)


class PassengerStatusSource:
    """Runs a shell status command and parses the queue depth from its stdout.

    One subprocess per :meth:`inspect` call, no retries.  The subprocess is
    started in its own session so a timeout kills the whole pipeline
    (``passenger-status | grep ...``), not just the shell.

    The run is shielded from caller cancellation: if the HTTP client goes
    away mid-check, the command still runs to completion or timeout and is
    always reaped.
    """

    def __init__(
        self,
        command: str,
        *,
        timeout_seconds: float = 5.0,
        parser: IOutputParser | None = None,
    ) -> None:
        self.command = command
        self.timeout_seconds = timeout_seconds
        self.parser = parser or DelimitedFieldParser()
        self._runs: set[asyncio.Task[str]] = set()

    async def inspect(self) -> int:
        """Run the status command once and return the parsed queue depth."""
        run = asyncio.ensure_future(self._run())
        self._runs.add(run)
        run.add_done_callback(self._finish_run)
        stdout = await asyncio.shield(run)
        depth = self.parser.parse(stdout)
        log.debug("Observed queue depth %d", depth)
        return depth

    def _finish_run(self, run: asyncio.Task[str]) -> None:
        # Retrieves the outcome of runs whose caller was cancelled.
        self._runs.discard(run)
        if run.cancelled():
            return
        exc = run.exception()
        if exc is not None:
            log.debug("Status command run finished with %s: %s", type(exc).__name__, exc)

    async def _run(self) -> str:
        try:
            process = await asyncio.create_subprocess_shell(
                self.command,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                start_new_session=True,
            )
        except OSError as exc:
            raise CommandFailedError(f"Could not start status command: {exc}") from exc

        try:
            stdout, stderr = await asyncio.wait_for(process.communicate(), timeout=self.timeout_seconds)
        except asyncio.TimeoutError:
            await _kill(process)
            raise InspectTimeoutError(
                f"Status command did not finish within {self.timeout_seconds:g}s"
            ) from None

        if process.returncode != 0:
            err = stderr.decode("utf-8", errors="replace").strip()
            raise CommandFailedError(
                f"Status command exited with status {process.returncode}",
                returncode=process.returncode,
                stderr=err,
            )

        return stdout.decode("utf-8", errors="replace")


async def _kill(process: asyncio.subprocess.Process) -> None:
    """SIGKILL the whole process group and reap the shell.

    The group is signalled even when the shell has already exited: a
    background child can still hold stdout open.
    """
    try:
        os.killpg(process.pid, signal.SIGKILL)
    except ProcessLookupError:
        pass
    await process.wait()
