"""Admission decision: queue depth + configured maximum -> admit or reject.

Fails closed.  An unreadable queue is treated the same as a full one, so an
orchestrator polling ``/health`` stops routing to this instance.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from fractions import Fraction

from passenger_probe.exceptions import InspectError
from passenger_probe.inspection.protocols import IQueueSource

log = logging.getLogger(__name__)

# Admit while depth is below 80% of the maximum; the rest is buffer.
HEADROOM_FACTOR = Fraction(4, 5)


@dataclass(frozen=True)
class AdmissionVerdict:
    """Outcome of a single health check."""

    admit: bool
    depth: int | None = None
    reason: str = ""

    @property
    def status_code(self) -> int:
        return 200 if self.admit else 503

    @property
    def body(self) -> str:
        return "true" if self.admit else "false"


def admits(depth: int, max_queue_length: int) -> bool:
    """True iff ``depth`` is strictly below ``HEADROOM_FACTOR * max_queue_length``."""
    if max_queue_length <= 0:
        return False
    return depth < HEADROOM_FACTOR * max_queue_length


async def _observe(source: IQueueSource, max_queue_length: int) -> AdmissionVerdict:
    try:
        depth = await source.inspect()
    except InspectError as exc:
        log.warning("Queue inspection failed (%s): %s", type(exc).__name__, exc)
        return AdmissionVerdict(admit=False, reason=type(exc).__name__)
    except Exception as exc:
        # unknown capacity reads as no capacity, whatever the source raised
        log.exception("Queue source %s raised unexpectedly", type(source).__name__)
        return AdmissionVerdict(admit=False, reason=type(exc).__name__)

    admit = admits(depth, max_queue_length)
    verdict = AdmissionVerdict(
        admit=admit,
        depth=depth,
        reason="below threshold" if admit else "at or above threshold",
    )
    log.debug("Queue depth %d against max %d: admit=%s", depth, max_queue_length, admit)
    return verdict


async def can_take_more_traffic(source: IQueueSource, max_queue_length: int) -> bool:
    """Observe the queue once and decide whether to accept more traffic.

    Any failure to observe the queue yields ``False``; nothing propagates.
    """
    verdict = await _observe(source, max_queue_length)
    return verdict.admit


class AdmissionEvaluator:
    """Binds a queue source to the configured maximum for per-request checks.

    Holds no mutable state; one instance is shared by all concurrent requests.
    """

    def __init__(self, source: IQueueSource, max_queue_length: int) -> None:
        self.source = source
        self.max_queue_length = max_queue_length

    async def evaluate(self) -> AdmissionVerdict:
        return await _observe(self.source, self.max_queue_length)

    async def can_take_more_traffic(self) -> bool:
        return await can_take_more_traffic(self.source, self.max_queue_length)
