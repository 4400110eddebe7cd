"""In-memory record store for unit tests and local runs."""

from __future__ import annotations

from typing import Callable

from csvloader.core.exceptions import PersistenceError
from csvloader.models.records import DataRecord


class MemoryRecordStore:
    """List-backed RecordStore.

    ``fail_on`` lets tests simulate a backend rejecting specific records.
    """

    def __init__(self, fail_on: Callable[[DataRecord], bool] | None = None) -> None:
        self._records: list[DataRecord] = []
        self._fail_on = fail_on

    def insert_record(self, record: DataRecord) -> None:
        if self._fail_on is not None and self._fail_on(record):
            raise PersistenceError(
                f"Insert rejected for record field1={record.field1!r}, field2={record.field2!r}"
            )
        self._records.append(record)

    @property
    def records(self) -> list[DataRecord]:
        return list(self._records)

    def clear(self) -> None:
        self._records.clear()
