"""Ingestion pipeline for uploaded CSV files.

Flow: empty check -> extension check -> header validation -> data-row check
-> (parse row -> insert record)* per line, stopping at the first failure.
Records inserted before a failing line are kept; the store owns any
transactional behaviour.
"""

from __future__ import annotations

import codecs
import csv
import io
from typing import BinaryIO, Iterator, Sequence, Union

from csvloader.core.config import IngestConfig
from csvloader.core.exceptions import PersistenceError
from csvloader.core.logging_config import get_logger
from csvloader.core.protocols import RecordStore
from csvloader.core.types import InputStream, Schema
from csvloader.ingest.record_parser import parse_row
from csvloader.models.outcomes import (
    EmptyInput,
    HeaderCountMismatch,
    HeaderNameMismatch,
    IngestionFailure,
    IngestionOutcome,
    MalformedInput,
    NoDataRows,
    PersistenceFailure,
    RowProcessingError,
    UnsupportedFormat,
)
from csvloader.models.records import REQUIRED_HEADERS, DataRecord, RawRow, check_schema

logger = get_logger(__name__)

HeaderFailure = Union[HeaderCountMismatch, HeaderNameMismatch]


def validate_header(
    headers: Sequence[str], schema: Schema = REQUIRED_HEADERS
) -> HeaderFailure | None:
    """Return the first header violation, or None when ``headers`` match exactly."""
    if len(headers) != len(schema):
        return HeaderCountMismatch(expected=len(schema), actual=len(headers), required=schema)
    for position, (expected, actual) in enumerate(zip(schema, headers)):
        if expected != actual:
            return HeaderNameMismatch(
                position=position, expected=expected, actual=actual, required=schema
            )
    return None


def has_required_extension(filename: str | None, extension: str) -> bool:
    """Case-insensitive suffix check; a missing filename never matches."""
    if not filename:
        return False
    return filename.lower().endswith(extension.lower())


def _decode_lines(data: bytes, encoding: str) -> Iterator[str]:
    """Decode one physical line at a time.

    Lines end at CR, LF or CRLF. A UTF-8 byte-order mark is only dropped
    from the first line.
    """
    body_encoding = "utf-8" if codecs.lookup(encoding).name == "utf-8-sig" else encoding
    for index, raw in enumerate(data.splitlines(keepends=True)):
        yield raw.decode(encoding if index == 0 else body_encoding)


class _RowReader:
    """Numbers decoded CSV rows and reports decode errors as values.

    Decoding line by line attributes an undecodable byte to its own row.
    Empty lines are kept as a single empty cell rather than skipped.
    """

    def __init__(self, data: bytes, encoding: str, delimiter: str) -> None:
        self._rows: Iterator[list[str]] = csv.reader(
            _decode_lines(data, encoding), delimiter=delimiter
        )
        self._line = 0

    def next_row(self) -> RawRow | MalformedInput | None:
        self._line += 1
        try:
            cells = next(self._rows)
        except StopIteration:
            return None
        except (UnicodeDecodeError, csv.Error) as exc:
            return MalformedInput(line=self._line, reason=str(exc))
        return RawRow(line=self._line, cells=tuple(cells) or ("",))


class IngestionPipeline:
    """Validates an uploaded CSV and inserts its rows one by one.

    The pipeline keeps no state between calls, so one instance can serve
    every upload handled by the process.
    """

    def __init__(
        self,
        store: RecordStore,
        config: IngestConfig | None = None,
        schema: Schema = REQUIRED_HEADERS,
    ) -> None:
        self._store = store
        self._config = config or IngestConfig()
        self._schema = check_schema(schema)

    def ingest(self, stream: InputStream, filename: str | None) -> IngestionOutcome:
        """Process one upload; the stream is closed before this returns."""
        if stream is None:
            return self._reject(EmptyInput(), filename)
        if isinstance(stream, (bytes, bytearray)):
            stream = io.BytesIO(stream)
        with stream:
            return self._ingest_stream(stream, filename)

    def _ingest_stream(self, stream: BinaryIO, filename: str | None) -> IngestionOutcome:
        data = stream.read()
        if not data:
            return self._reject(EmptyInput(), filename)

        extension = self._config.required_extension
        if not has_required_extension(filename, extension):
            return self._reject(
                UnsupportedFormat(filename=filename, required_extension=extension), filename
            )

        logger.info("file_processing_started", filename=filename)
        reader = _RowReader(data, self._config.encoding, self._config.delimiter)
        header = reader.next_row()
        if header is None:
            return self._reject(EmptyInput(), filename)
        if isinstance(header, MalformedInput):
            return self._reject(header, filename)

        logger.info("validating_headers", headers=list(header.cells))
        header_failure = validate_header(header.cells, self._schema)
        if header_failure is not None:
            return self._reject(header_failure, filename)

        first_row = reader.next_row()
        if first_row is None:
            return self._reject(NoDataRows(), filename)
        return self._process_rows(reader, first_row, filename)

    def _process_rows(
        self,
        reader: _RowReader,
        first_row: RawRow | MalformedInput,
        filename: str | None,
    ) -> IngestionOutcome:
        persisted = 0
        row: RawRow | MalformedInput | None = first_row
        while row is not None:
            failure = self._process_row(row)
            if failure is not None:
                logger.error(
                    "row_processing_failed",
                    filename=filename,
                    line=failure.line,
                    kind=str(failure.cause.kind),
                    reason=failure.cause.message,
                )
                return self._reject(failure, filename, persisted)
            persisted += 1
            logger.info("record_inserted", filename=filename, line=row.line)
            row = reader.next_row()

        logger.info("file_processing_completed", filename=filename, records=persisted)
        return IngestionOutcome.succeeded(filename, persisted)

    def _process_row(self, row: RawRow | MalformedInput) -> RowProcessingError | None:
        if isinstance(row, MalformedInput):
            return RowProcessingError(line=row.line, cause=row)

        result = parse_row(row, self._schema)
        if not isinstance(result, DataRecord):
            return RowProcessingError(line=row.line, cause=result)

        try:
            self._store.insert_record(result)
        except PersistenceError as exc:
            return RowProcessingError(line=row.line, cause=PersistenceFailure(reason=str(exc)))
        return None

    def _reject(
        self, failure: IngestionFailure, filename: str | None, persisted: int = 0
    ) -> IngestionOutcome:
        outcome = IngestionOutcome.failed(failure, filename=filename, records_persisted=persisted)
        logger.warning(
            "file_processing_failed",
            filename=filename,
            kind=str(failure.kind),
            line=outcome.line,
            message=outcome.message,
        )
        return outcome


def ingest(
    stream: InputStream,
    filename: str | None,
    store: RecordStore,
    config: IngestConfig | None = None,
) -> IngestionOutcome:
    """Run a one-off ingest with the default schema."""
    return IngestionPipeline(store, config).ingest(stream, filename)
