"""Pluggable record stores behind the RecordStore protocol."""

from __future__ import annotations

from csvloader.core.config import AppSettings
from csvloader.core.protocols import RecordStore
from csvloader.persistence.dynamodb_backend import DynamoDBRecordStore
from csvloader.persistence.memory_backend import MemoryRecordStore


def create_record_store(settings: AppSettings | None = None) -> RecordStore:
    """Create the record store selected by ``settings.persistence.backend``."""
    if settings is None:
        settings = AppSettings()

    if settings.persistence.backend == "dynamodb":
        return DynamoDBRecordStore(
            table_name=settings.dynamodb.table_name,
            table_suffix=settings.dynamodb.table_suffix,
            region=settings.dynamodb.region,
            endpoint_url=settings.dynamodb.endpoint_url,
        )
    return MemoryRecordStore()
