"""DynamoDB backend implementing RecordStore."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from csvloader.core.exceptions import PersistenceError
from csvloader.models.records import DataRecord


class DynamoDBRecordStore:
    """Production RecordStore writing one item per record.

    Items are keyed ``PK=RECORD#<uuid4>``, ``SK=DATA``; the pipeline assigns
    no identity of its own.
    """

    def __init__(self, table_name: str = "csvloader-records", table_suffix: str = "",
                 region: str = "us-east-1", endpoint_url: str | None = None) -> None:
        self._table_name = f"{table_name}{table_suffix}"
        self._region = region
        self._endpoint_url = endpoint_url
        kwargs: dict = {"region_name": region}
        if endpoint_url:
            kwargs["endpoint_url"] = endpoint_url
        self._ddb = boto3.resource("dynamodb", **kwargs)

    @property
    def table_name(self) -> str:
        return self._table_name

    def _table(self):
        return self._ddb.Table(self._table_name)

    def _to_item(self, record: DataRecord) -> dict[str, Any]:
        return {
            "PK": f"RECORD#{uuid.uuid4()}",
            "SK": "DATA",
            "field1": record.field1,
            "field2": record.field2,
            "createdAt": datetime.now(timezone.utc).isoformat(),
        }

    def insert_record(self, record: DataRecord) -> None:
        item = self._to_item(record)
        try:
            self._table().put_item(
                Item=item,
                ConditionExpression="attribute_not_exists(PK)",
            )
        except (ClientError, BotoCoreError) as exc:
            raise PersistenceError(
                f"DynamoDB insert into {self._table_name!r} failed: {exc}"
            ) from exc

    def list_records(self) -> list[DataRecord]:
        """Scan the table and return every stored record (unordered)."""
        tbl = self._table()
        try:
            resp = tbl.scan()
            items = resp.get("Items", [])
            while "LastEvaluatedKey" in resp:
                resp = tbl.scan(ExclusiveStartKey=resp["LastEvaluatedKey"])
                items.extend(resp.get("Items", []))
        except (ClientError, BotoCoreError) as exc:
            raise PersistenceError(f"DynamoDB scan of {self._table_name!r} failed: {exc}") from exc
        return [DataRecord(field1=i["field1"], field2=i["field2"]) for i in items]
