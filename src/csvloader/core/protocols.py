"""Protocol interfaces for csvloader collaborators.

Structural typing keeps the pipeline independent of any storage backend.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from csvloader.models.records import DataRecord


# ---------------------------------------------------------------------------
# Persistence: Record Store
# ---------------------------------------------------------------------------

@runtime_checkable
class RecordStore(Protocol):
    """Accepts validated records one at a time.

    Implementations raise ``PersistenceError`` when a record is rejected.
    """

    def insert_record(self, record: DataRecord) -> None: ...
