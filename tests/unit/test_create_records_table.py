"""Tests for the DynamoDB table creation script."""

from __future__ import annotations

import sys
from pathlib import Path

import boto3
import pytest
from moto import mock_aws

# Make scripts/ importable
sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent / "scripts"))

from create_records_table import create_records_table  # noqa: E402


@pytest.fixture
def ddb():
    with mock_aws():
        yield boto3.resource("dynamodb", region_name="us-east-1")


class TestCreateRecordsTable:
    def test_creates_table_with_suffix(self, ddb):
        assert create_records_table(ddb, suffix="-test") is True
        client = boto3.client("dynamodb", region_name="us-east-1")
        assert client.list_tables()["TableNames"] == ["csvloader-records-test"]

    def test_idempotent_skips_existing(self, ddb):
        create_records_table(ddb, suffix="-test")
        assert create_records_table(ddb, suffix="-test") is False
        client = boto3.client("dynamodb", region_name="us-east-1")
        assert len(client.list_tables()["TableNames"]) == 1
