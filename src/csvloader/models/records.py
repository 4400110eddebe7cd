"""Row and record models for the upload pipeline."""

from __future__ import annotations

from pydantic import BaseModel, Field

from csvloader.core.types import Schema

# Columns a valid upload must carry, in order.
REQUIRED_HEADERS: Schema = ("field1", "field2")


class RawRow(BaseModel):
    """One decoded data row and the line it came from (header is line 1)."""

    model_config = {"frozen": True}

    line: int = Field(ge=1)
    cells: tuple[str, ...] = ()


class DataRecord(BaseModel):
    """Validated two-field record handed to the record store."""

    model_config = {"frozen": True, "str_strip_whitespace": True}

    field1: str = Field(min_length=1)
    field2: str = Field(min_length=1)


def check_schema(schema: Schema) -> Schema:
    """Return ``schema`` if it names each DataRecord field exactly once.

    Raises:
        ValueError: for missing, unknown or repeated column names.
    """
    fields = tuple(DataRecord.model_fields)
    if len(schema) != len(fields) or set(schema) != set(fields):
        raise ValueError(
            f"Schema {list(schema)} must name each record field exactly once: {list(fields)}"
        )
    return schema
