"""passenger-probe: reports whether a Passenger server can take more traffic.

Usage::

    from passenger_probe import AdmissionEvaluator, PassengerStatusSource

    source = PassengerStatusSource("passenger-status | grep 'Requests in top-level queue'")
    evaluator = AdmissionEvaluator(source, max_queue_length=100)
    verdict = await evaluator.evaluate()
"""

from __future__ import annotations

from passenger_probe.admission import (
    HEADROOM_FACTOR,
    AdmissionEvaluator,
    AdmissionVerdict,
    admits,
    can_take_more_traffic,
)
from passenger_probe.core.config import AppSettings, load_settings
from passenger_probe.exceptions import (
    CommandFailedError,
    ConfigurationError,
    InspectError,
    InspectTimeoutError,
    ParseFailedError,
    ProbeError,
)
from passenger_probe.inspection import IQueueSource, PassengerStatusSource, create_queue_source

__all__ = [
    "HEADROOM_FACTOR",
    "AdmissionEvaluator",
    "AdmissionVerdict",
    "AppSettings",
    "CommandFailedError",
    "ConfigurationError",
    "IQueueSource",
    "InspectError",
    "InspectTimeoutError",
    "ParseFailedError",
    "PassengerStatusSource",
    "ProbeError",
    "admits",
    "can_take_more_traffic",
    "create_queue_source",
    "load_settings",
]
