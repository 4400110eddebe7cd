"""Tests for configuration defaults and env overrides."""

from __future__ import annotations

from csvloader.core.config import AppSettings, DynamoDBConfig, IngestConfig


def test_default_settings():
    settings = AppSettings()
    assert settings.environment == "dev"
    assert settings.persistence.backend == "memory"


def test_ingest_config_defaults():
    config = IngestConfig()
    assert config.required_extension == ".csv"
    assert config.encoding == "utf-8-sig"
    assert config.delimiter == ","


def test_dynamodb_config_env_override(monkeypatch):
    monkeypatch.setenv("CSVLOADER_DYNAMO_TABLE_SUFFIX", "-uat")
    monkeypatch.setenv("CSVLOADER_DYNAMO_ENDPOINT_URL", "http://localhost:4566")
    config = DynamoDBConfig()
    assert config.table_suffix == "-uat"
    assert config.endpoint_url == "http://localhost:4566"
