"""Tagged failure variants and the per-upload ingestion outcome.

Every failure model carries a ``kind`` discriminator so outcomes round-trip
through JSON without losing which check failed.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import StrEnum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field, model_validator

from csvloader.core.exceptions import IngestionFailedError


class FailureKind(StrEnum):
    EMPTY_INPUT = "EmptyInput"
    UNSUPPORTED_FORMAT = "UnsupportedFormat"
    HEADER_COUNT_MISMATCH = "HeaderCountMismatch"
    HEADER_NAME_MISMATCH = "HeaderNameMismatch"
    NO_DATA_ROWS = "NoDataRows"
    INSUFFICIENT_COLUMNS = "InsufficientColumns"
    EMPTY_FIELD = "EmptyField"
    MALFORMED_INPUT = "MalformedInput"
    PERSISTENCE_FAILURE = "PersistenceFailure"
    ROW_PROCESSING_ERROR = "RowProcessingError"


class OutcomeStatus(StrEnum):
    SUCCESS = "SUCCESS"
    FAILED = "FAILED"


class _Failure(BaseModel, ABC):
    model_config = {"frozen": True}

    @property
    @abstractmethod
    def message(self) -> str: ...


def _required_list(required: tuple[str, ...]) -> str:
    return ", ".join(required)


# --- Input-level failures ---


class EmptyInput(_Failure):
    kind: Literal[FailureKind.EMPTY_INPUT] = FailureKind.EMPTY_INPUT

    @property
    def message(self) -> str:
        return "File is empty or null"


class UnsupportedFormat(_Failure):
    kind: Literal[FailureKind.UNSUPPORTED_FORMAT] = FailureKind.UNSUPPORTED_FORMAT
    filename: Optional[str] = None
    required_extension: str = ".csv"

    @property
    def message(self) -> str:
        return f"File must be a {self.required_extension.lstrip('.').upper()} file"


class HeaderCountMismatch(_Failure):
    kind: Literal[FailureKind.HEADER_COUNT_MISMATCH] = FailureKind.HEADER_COUNT_MISMATCH
    expected: int
    actual: int
    required: tuple[str, ...]

    @property
    def message(self) -> str:
        return (
            f"Invalid number of headers. Expected {self.expected} headers but found "
            f"{self.actual}. Required headers are: {_required_list(self.required)}"
        )


class HeaderNameMismatch(_Failure):
    kind: Literal[FailureKind.HEADER_NAME_MISMATCH] = FailureKind.HEADER_NAME_MISMATCH
    position: int
    expected: str
    actual: str
    required: tuple[str, ...]

    @property
    def message(self) -> str:
        return (
            f"Invalid header found: '{self.actual}'. Expected header: '{self.expected}'. "
            f"Required headers are: {_required_list(self.required)}"
        )


class NoDataRows(_Failure):
    kind: Literal[FailureKind.NO_DATA_ROWS] = FailureKind.NO_DATA_ROWS

    @property
    def message(self) -> str:
        return "CSV file is empty (no data rows)"


# --- Row-level causes ---


class InsufficientColumns(_Failure):
    kind: Literal[FailureKind.INSUFFICIENT_COLUMNS] = FailureKind.INSUFFICIENT_COLUMNS
    line: int
    expected: int
    found: int

    @property
    def message(self) -> str:
        return (
            f"Record at line {self.line} has insufficient columns. "
            f"Expected: {self.expected}, Found: {self.found}"
        )


class EmptyField(_Failure):
    kind: Literal[FailureKind.EMPTY_FIELD] = FailureKind.EMPTY_FIELD
    line: int
    field_name: str

    @property
    def message(self) -> str:
        return f"Empty value found for '{self.field_name}' at line {self.line}"


class MalformedInput(_Failure):
    """Undecodable bytes or broken CSV quoting."""

    kind: Literal[FailureKind.MALFORMED_INPUT] = FailureKind.MALFORMED_INPUT
    line: int
    reason: str

    @property
    def message(self) -> str:
        return f"Malformed input at line {self.line}: {self.reason}"


class PersistenceFailure(_Failure):
    kind: Literal[FailureKind.PERSISTENCE_FAILURE] = FailureKind.PERSISTENCE_FAILURE
    reason: str

    @property
    def message(self) -> str:
        return self.reason


ParseFailure = Union[InsufficientColumns, EmptyField]

RowFailureCause = Annotated[
    Union[InsufficientColumns, EmptyField, MalformedInput, PersistenceFailure],
    Field(discriminator="kind"),
]


class RowProcessingError(_Failure):
    """A row-level cause attributed to the data line that produced it."""

    kind: Literal[FailureKind.ROW_PROCESSING_ERROR] = FailureKind.ROW_PROCESSING_ERROR
    line: int
    cause: RowFailureCause

    @property
    def message(self) -> str:
        return f"Error processing line {self.line}: {self.cause.message}"


IngestionFailure = Annotated[
    Union[
        EmptyInput,
        UnsupportedFormat,
        HeaderCountMismatch,
        HeaderNameMismatch,
        NoDataRows,
        MalformedInput,
        RowProcessingError,
    ],
    Field(discriminator="kind"),
]


class IngestionOutcome(BaseModel):
    """Terminal result of one ``ingest`` call."""

    model_config = {"frozen": True}

    status: OutcomeStatus
    failure: Optional[IngestionFailure] = None
    filename: Optional[str] = None
    records_persisted: int = 0

    @model_validator(mode="after")
    def _failure_matches_status(self) -> IngestionOutcome:
        if (self.status == OutcomeStatus.SUCCESS) != (self.failure is None):
            raise ValueError("a failure is required exactly when status is FAILED")
        return self

    @classmethod
    def succeeded(cls, filename: str | None, records_persisted: int) -> IngestionOutcome:
        return cls(
            status=OutcomeStatus.SUCCESS,
            filename=filename,
            records_persisted=records_persisted,
        )

    @classmethod
    def failed(
        cls, failure: IngestionFailure, filename: str | None = None, records_persisted: int = 0
    ) -> IngestionOutcome:
        return cls(
            status=OutcomeStatus.FAILED,
            failure=failure,
            filename=filename,
            records_persisted=records_persisted,
        )

    @property
    def ok(self) -> bool:
        return self.status == OutcomeStatus.SUCCESS

    @property
    def line(self) -> int | None:
        """Line number of a row-level failure, else None."""
        return getattr(self.failure, "line", None)

    @property
    def message(self) -> str:
        if self.failure is None:
            return "File processed successfully"
        return self.failure.message

    def raise_for_failure(self) -> None:
        """Raise ``IngestionFailedError`` when this outcome is a failure."""
        if not self.ok:
            raise IngestionFailedError(self)
