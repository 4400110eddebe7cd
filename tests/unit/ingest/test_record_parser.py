"""Tests for parse_row."""

from __future__ import annotations

import pytest

from csvloader.ingest.record_parser import parse_row
from csvloader.models.outcomes import EmptyField, InsufficientColumns
from csvloader.models.records import DataRecord, RawRow


def _row(*cells: str, line: int = 2) -> RawRow:
    return RawRow(line=line, cells=cells)


class TestValidRows:
    @pytest.mark.parametrize("cells", [("x", "y"), (" x ", "y"), ("x", "\ty\t"), ("  x", "y  ")])
    def test_trims_surrounding_whitespace(self, cells):
        assert parse_row(_row(*cells)) == DataRecord(field1="x", field2="y")

    def test_inner_whitespace_is_kept(self):
        record = parse_row(_row(" New York ", "a  b"))
        assert record.field1 == "New York"
        assert record.field2 == "a  b"

    def test_extra_columns_are_ignored(self):
        assert parse_row(_row("a", "b", "c", "")) == DataRecord(field1="a", field2="b")

    def test_same_row_twice_gives_equal_records(self):
        row = _row(" p ", "q")
        assert parse_row(row) == parse_row(row)


class TestInsufficientColumns:
    def test_single_cell(self):
        result = parse_row(_row("only", line=7))
        assert result == InsufficientColumns(line=7, expected=2, found=1)

    def test_no_cells(self):
        result = parse_row(_row(line=4))
        assert isinstance(result, InsufficientColumns)
        assert result.found == 0

    def test_count_checked_before_emptiness(self):
        assert isinstance(parse_row(_row("")), InsufficientColumns)


class TestEmptyField:
    def test_empty_field2(self):
        assert parse_row(_row("a", "")) == EmptyField(line=2, field_name="field2")

    def test_whitespace_only_counts_as_empty(self):
        assert parse_row(_row("a", "   ")) == EmptyField(line=2, field_name="field2")

    @pytest.mark.parametrize("field2", ["", " ", "b"])
    def test_field1_reported_first(self, field2):
        result = parse_row(_row(" ", field2, line=9))
        assert result == EmptyField(line=9, field_name="field1")


def test_empty_field_message():
    result = parse_row(_row("a", "", line=3))
    assert result.message == "Empty value found for 'field2' at line 3"


class TestSchemaArgument:
    def test_reordered_schema_reads_by_position(self):
        result = parse_row(_row("b", "a"), schema=("field2", "field1"))
        assert result == DataRecord(field1="a", field2="b")

    @pytest.mark.parametrize("schema", [("name", "city"), ("field1", "field2", "extra")])
    def test_unknown_names_raise_value_error(self, schema):
        with pytest.raises(ValueError):
            parse_row(_row("a", "b", "c"), schema=schema)
