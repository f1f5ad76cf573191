"""Tests for status output parsers."""

from __future__ import annotations

import pytest

from passenger_probe.core.config import InspectorConfig
from passenger_probe.exceptions import ParseFailedError
from passenger_probe.inspection.parsers import ColumnParser, DelimitedFieldParser, create_parser
from passenger_probe.inspection.protocols import IOutputParser


class TestDelimitedFieldParser:
    def test_parses_passenger_line(self) -> None:
        parser = DelimitedFieldParser()
        assert parser.parse("Requests in top-level queue : 0\n") == 0

    def test_trims_whitespace(self) -> None:
        assert DelimitedFieldParser().parse("Requests in queue :   42   ") == 42

    def test_uses_first_non_blank_line(self) -> None:
        output = "\n\nRequests in top-level queue : 12\nRequests in top-level queue : 99\n"
        assert DelimitedFieldParser().parse(output) == 12

    def test_missing_delimiter(self) -> None:
        with pytest.raises(ParseFailedError) as exc_info:
            DelimitedFieldParser().parse("no colon here")
        assert exc_info.value.raw_output == "no colon here"

    def test_non_integer_value(self) -> None:
        with pytest.raises(ParseFailedError, match="not an integer"):
            DelimitedFieldParser().parse("Requests in queue : abc")

    def test_empty_value(self) -> None:
        with pytest.raises(ParseFailedError):
            DelimitedFieldParser().parse("Requests in queue :")

    def test_float_value_rejected(self) -> None:
        with pytest.raises(ParseFailedError):
            DelimitedFieldParser().parse("Requests in queue : 4.5")

    def test_negative_depth_rejected(self) -> None:
        with pytest.raises(ParseFailedError, match="negative"):
            DelimitedFieldParser().parse("Requests in queue : -1")

    def test_empty_output(self) -> None:
        with pytest.raises(ParseFailedError, match="no output"):
            DelimitedFieldParser().parse("   \n")

    def test_custom_delimiter_and_index(self) -> None:
        parser = DelimitedFieldParser(delimiter="=", field_index=2)
        assert parser.parse("queue=main=17") == 17


class TestColumnParser:
    def test_last_column_by_default(self) -> None:
        assert ColumnParser().parse("Requests in top-level queue : 5") == 5

    def test_explicit_column(self) -> None:
        assert ColumnParser(field_index=1).parse("queue 8 requests") == 8

    def test_column_out_of_range(self) -> None:
        with pytest.raises(ParseFailedError, match="column"):
            ColumnParser(field_index=9).parse("queue 8")


class TestCreateParser:
    def test_default_is_delimited(self) -> None:
        parser = create_parser(InspectorConfig())
        assert isinstance(parser, DelimitedFieldParser)
        assert parser.delimiter == ":"
        assert parser.field_index == 1

    def test_column_strategy(self) -> None:
        parser = create_parser(InspectorConfig(parser="column"))
        assert isinstance(parser, ColumnParser)
        assert parser.field_index == -1

    def test_field_index_override(self) -> None:
        parser = create_parser(InspectorConfig(parser="column", field_index=5))
        assert parser.field_index == 5

    def test_parsers_satisfy_protocol(self) -> None:
        assert isinstance(DelimitedFieldParser(), IOutputParser)
        assert isinstance(ColumnParser(), IOutputParser)
