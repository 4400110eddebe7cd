"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class IngestConfig(BaseSettings):
    """Upload decoding and file acceptance settings."""

    model_config = {"env_prefix": "CSVLOADER_INGEST_"}

    required_extension: str = ".csv"
    encoding: str = "utf-8-sig"  # strips a leading BOM
    delimiter: str = ","


class DynamoDBConfig(BaseSettings):
    """DynamoDB record table configuration."""

    model_config = {"env_prefix": "CSVLOADER_DYNAMO_"}

    table_name: str = "csvloader-records"
    table_suffix: str = ""  # "-dev", "-uat", or "" for prod
    region: str = "us-east-1"
    endpoint_url: str | None = None  # LocalStack override


class PersistenceConfig(BaseSettings):
    """Record store selection."""

    model_config = {"env_prefix": "CSVLOADER_PERSISTENCE_"}

    backend: Literal["memory", "dynamodb"] = "memory"


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "CSVLOADER_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"

    ingest: IngestConfig = IngestConfig()
    persistence: PersistenceConfig = PersistenceConfig()
    dynamodb: DynamoDBConfig = DynamoDBConfig()
