"""csvloader exception hierarchy.

Validation failures are returned as values (see ``csvloader.models.outcomes``);
these exceptions cover infrastructure faults and callers that opt into raising.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from csvloader.models.outcomes import IngestionOutcome


class CsvLoaderError(Exception):
    """Base exception for all csvloader errors."""


class PersistenceError(CsvLoaderError):
    """A record store rejected a record."""


class IngestionFailedError(CsvLoaderError):
    """Raised by ``IngestionOutcome.raise_for_failure`` on a failed ingest."""

    def __init__(self, outcome: IngestionOutcome) -> None:
        self.outcome = outcome
        self.line = outcome.line
        super().__init__(outcome.message)
