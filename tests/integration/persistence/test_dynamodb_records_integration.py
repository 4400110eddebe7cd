"""Integration tests for DynamoDBRecordStore against LocalStack."""

from __future__ import annotations

import uuid

import pytest

from csvloader.ingest.pipeline import IngestionPipeline
from csvloader.persistence.dynamodb_backend import DynamoDBRecordStore
from tests.integration.conftest import LOCALSTACK_URL, skip_no_localstack


@skip_no_localstack
class TestDynamoDBIntegration:
    @pytest.fixture
    def store(self, records_table):
        return DynamoDBRecordStore(
            table_suffix=records_table,
            region="us-east-1",
            endpoint_url=LOCALSTACK_URL,
        )

    def test_upload_rows_are_stored(self, store):
        marker = uuid.uuid4().hex
        data = f"field1,field2\n{marker},one\n{marker},two\n".encode()
        outcome = IngestionPipeline(store).ingest(data, "integration.csv")
        assert outcome.ok
        stored = [r for r in store.list_records() if r.field1 == marker]
        assert sorted(r.field2 for r in stored) == ["one", "two"]

    def test_failed_row_keeps_previous_rows(self, store):
        marker = uuid.uuid4().hex
        data = f"field1,field2\n{marker},one\n{marker},\n".encode()
        outcome = IngestionPipeline(store).ingest(data, "integration.csv")
        assert outcome.line == 3
        assert [r.field2 for r in store.list_records() if r.field1 == marker] == ["one"]
