"""Queue inspection: status-command sources and output parsers."""

from __future__ import annotations

from passenger_probe.inspection.factory import create_queue_source
from passenger_probe.inspection.parsers import ColumnParser, DelimitedFieldParser, create_parser
from passenger_probe.inspection.passenger import PassengerStatusSource
from passenger_probe.inspection.protocols import IOutputParser, IQueueSource

__all__ = [
    "ColumnParser",
    "DelimitedFieldParser",
    "IOutputParser",
    "IQueueSource",
    "PassengerStatusSource",
    "create_parser",
    "create_queue_source",
]
