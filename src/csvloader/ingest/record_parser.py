"""RecordParser: turns one decoded CSV row into a DataRecord or a failure."""

from __future__ import annotations

from csvloader.core.types import Schema
from csvloader.models.outcomes import EmptyField, InsufficientColumns, ParseFailure
from csvloader.models.records import REQUIRED_HEADERS, DataRecord, RawRow, check_schema


def parse_row(row: RawRow, schema: Schema = REQUIRED_HEADERS) -> DataRecord | ParseFailure:
    """Validate a row against ``schema`` and build a trimmed record.

    Checks run in order and the first failure wins: column count, then
    emptiness of each schema field in schema order. Cells beyond the schema
    width are ignored.

    Raises:
        ValueError: if ``schema`` does not name exactly the DataRecord fields.
    """
    check_schema(schema)
    if len(row.cells) < len(schema):
        return InsufficientColumns(line=row.line, expected=len(schema), found=len(row.cells))

    values = {name: row.cells[position].strip() for position, name in enumerate(schema)}

    for name in schema:
        if not values[name]:
            return EmptyField(line=row.line, field_name=name)

    return DataRecord(**values)
