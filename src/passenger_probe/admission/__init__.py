"""Traffic admission decision."""

from __future__ import annotations

from passenger_probe.admission.evaluator import (
    HEADROOM_FACTOR,
    AdmissionEvaluator,
    AdmissionVerdict,
    admits,
    can_take_more_traffic,
)

__all__ = [
    "HEADROOM_FACTOR",
    "AdmissionEvaluator",
    "AdmissionVerdict",
    "admits",
    "can_take_more_traffic",
]
