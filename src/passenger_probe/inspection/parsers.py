"""Status output parsers.

The documented contract is one line of the form ``<label> : <integer>``,
handled by :class:`DelimitedFieldParser`.  :class:`ColumnParser` covers
status tools that print whitespace-separated columns instead.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from passenger_probe.exceptions import ParseFailedError
from passenger_probe.inspection.protocols import IOutputParser

if TYPE_CHECKING:
    from passenger_probe.core.config import InspectorConfig

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _first_line(output: str) -> str:
    for line in output.splitlines():
        if line.strip():
            return line
    raise ParseFailedError("Status command produced no output", raw_output=output)


def _to_depth(token: str, output: str) -> int:
    token = token.strip()
    if not _INTEGER.fullmatch(token):
        raise ParseFailedError(f"Queue depth {token!r} is not an integer", raw_output=output)
    depth = int(token, 10)
    if depth < 0:
        raise ParseFailedError(f"Queue depth {depth} is negative", raw_output=output)
    return depth


class DelimitedFieldParser:
    """Split the first non-blank line on ``delimiter`` and read one field."""

    def __init__(self, delimiter: str = ":", field_index: int = 1) -> None:
        self.delimiter = delimiter
        self.field_index = field_index

    def parse(self, output: str) -> int:
        fields = _first_line(output).split(self.delimiter)
        try:
            token = fields[self.field_index]
        except IndexError:
            raise ParseFailedError(
                f"Expected field {self.field_index} after splitting on {self.delimiter!r}, "
                f"got {len(fields)} field(s)",
                raw_output=output,
            ) from None
        return _to_depth(token, output)


class ColumnParser:
    """Split the first non-blank line on whitespace and read one column."""

    def __init__(self, field_index: int = -1) -> None:
        self.field_index = field_index

    def parse(self, output: str) -> int:
        columns = _first_line(output).split()
        try:
            token = columns[self.field_index]
        except IndexError:
            raise ParseFailedError(
                f"Expected column {self.field_index}, got {len(columns)} column(s)",
                raw_output=output,
            ) from None
        return _to_depth(token, output)


def create_parser(config: InspectorConfig) -> IOutputParser:
    """Build the parser selected by ``config.parser``."""
    if config.parser == "column":
        return ColumnParser(field_index=-1 if config.field_index is None else config.field_index)
    return DelimitedFieldParser(
        delimiter=config.delimiter,
        field_index=1 if config.field_index is None else config.field_index,
    )
