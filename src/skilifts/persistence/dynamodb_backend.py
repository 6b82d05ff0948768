"""DynamoDB backend implementing ISkiLiftStore over the single SkiLifts table."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from decimal import Decimal, DecimalException
from typing import Any, Iterator

from botocore.exceptions import BotoCoreError, ClientError

from skilifts.core.exceptions import NotFoundError, StorageError
from skilifts.core.types import RESORT_LIFT, STATIC_METADATA, JsonDict
from skilifts.models.records import DynamicData, Page, ResortData, SkiLiftRecord, StaticData
from skilifts.models.schemas import (
    DEFAULT_LIMIT,
    CreateDynamicDataInput,
    CreateResortDataInput,
    CreateStaticDataInput,
    ListQuery,
    PartialUpdate,
    RidersQuery,
    UpdateDynamicDataInput,
    UpdateStaticDataInput,
)

logger = logging.getLogger(__name__)

TABLE_NAME = "SkiLifts"
INDEX_NAME = "SkiLiftsByRiders"


def _to_dynamodb(obj: Any) -> Any:
    """Convert floats to Decimal, recursively, for the boto3 resource layer."""
    if isinstance(obj, bool):
        return obj
    if isinstance(obj, float):
        return Decimal(str(obj))
    if isinstance(obj, dict):
        return {k: _to_dynamodb(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_to_dynamodb(i) for i in obj]
    return obj


def _decode_decimals(obj: Any) -> Any:
    """Convert Decimal values in a DynamoDB item to int/float."""
    if isinstance(obj, Decimal):
        return int(obj) if obj == int(obj) else float(obj)
    if isinstance(obj, dict):
        return {k: _decode_decimals(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_decode_decimals(i) for i in obj]
    return obj


def build_update_expression(fields: JsonDict) -> dict[str, Any]:
    """Build UpdateItem arguments that SET exactly the given attributes."""
    clauses: list[str] = []
    names: dict[str, str] = {}
    values: dict[str, Any] = {}
    for attr, value in fields.items():
        token = attr[0].lower() + attr[1:]
        clauses.append(f"#{token} = :{token}")
        names[f"#{token}"] = attr
        values[f":{token}"] = _to_dynamodb(value)
    return {
        "UpdateExpression": "SET " + ", ".join(clauses),
        "ExpressionAttributeNames": names,
        "ExpressionAttributeValues": values,
    }


@contextmanager
def _storage_call(message: str) -> Iterator[None]:
    """Wrap boto3 failures, including request serialization, as StorageError."""
    try:
        yield
    except (BotoCoreError, ClientError, DecimalException, TypeError) as exc:
        logger.debug("%s: %s", message, exc)
        raise StorageError(message, cause=exc) from exc


class DynamoDBSkiLiftStore:
    """Production ISkiLiftStore backed by one DynamoDB table and its rider index."""

    def __init__(self, dynamodb: Any, table_name: str = TABLE_NAME,
                 index_name: str = INDEX_NAME) -> None:
        self._ddb = dynamodb
        self._table_name = table_name
        self._index_name = index_name
        self._table = dynamodb.Table(table_name)

    @property
    def table_name(self) -> str:
        return self._table_name

    @property
    def index_name(self) -> str:
        return self._index_name

    def _put(self, record: SkiLiftRecord, message: str) -> None:
        with _storage_call(message):
            self._table.put_item(Item=_to_dynamodb(record.to_item()))

    @staticmethod
    def _page(resp: dict[str, Any]) -> Page:
        last_key = resp.get("LastEvaluatedKey")
        return Page(
            items=[_decode_decimals(item) for item in resp.get("Items", [])],
            count=resp.get("Count", 0),
            lastEvaluatedKey=_decode_decimals(last_key) if last_key else None,
        )

    # ---- create ----

    def create_static(self, data: CreateStaticDataInput) -> StaticData:
        record = StaticData(
            Lift=data.Lift,
            ExperiencedRidersOnly=data.ExperiencedRidersOnly,
            VerticalFeet=data.VerticalFeet,
            LiftTime=data.LiftTime,
        )
        self._put(record, "Failed to create static data")
        return record

    def create_dynamic(self, data: CreateDynamicDataInput) -> DynamicData:
        record = DynamicData(**data.model_dump())
        self._put(record, "Failed to create dynamic data")
        return record

    def create_resort(self, data: CreateResortDataInput) -> ResortData:
        record = ResortData(Lift=RESORT_LIFT, **data.model_dump())
        self._put(record, "Failed to create resort data")
        return record

    # ---- read ----

    def get(self, lift: str, metadata: str) -> JsonDict:
        with _storage_call("Failed to get ski lift data"):
            resp = self._table.get_item(Key={"Lift": lift, "Metadata": metadata})
        item = resp.get("Item")
        if item is None:
            raise NotFoundError(f"Ski lift data not found for {lift} - {metadata}")
        return _decode_decimals(item)

    def query_by_lift(self, lift: str, limit: int = DEFAULT_LIMIT) -> Page:
        """All rows for one lift in sort-key order."""
        with _storage_call("Failed to query lift data"):
            resp = self._table.query(
                KeyConditionExpression="Lift = :lift",
                ExpressionAttributeValues={":lift": lift},
                Limit=limit,
            )
        return self._page(resp)

    def list(self, query: ListQuery) -> Page:
        """Scan one page of the table, resuming after the given key if complete."""
        params: dict[str, Any] = {"Limit": query.limit}
        if query.lastEvaluatedLift and query.lastEvaluatedMetadata:
            params["ExclusiveStartKey"] = {
                "Lift": query.lastEvaluatedLift,
                "Metadata": query.lastEvaluatedMetadata,
            }
        with _storage_call("Failed to list ski lifts"):
            resp = self._table.scan(**params)
        return self._page(resp)

    def query_by_riders(self, lift: str, query: RidersQuery) -> Page:
        """Query the rider index for one lift, highest rider counts first."""
        condition = "Lift = :lift"
        values: dict[str, Any] = {":lift": lift}

        if query.minRiders is not None and query.maxRiders is not None:
            condition += " AND TotalUniqueLiftRiders BETWEEN :minRiders AND :maxRiders"
            values[":minRiders"] = _to_dynamodb(query.minRiders)
            values[":maxRiders"] = _to_dynamodb(query.maxRiders)
        elif query.minRiders is not None:
            condition += " AND TotalUniqueLiftRiders >= :minRiders"
            values[":minRiders"] = _to_dynamodb(query.minRiders)
        elif query.maxRiders is not None:
            condition += " AND TotalUniqueLiftRiders <= :maxRiders"
            values[":maxRiders"] = _to_dynamodb(query.maxRiders)

        with _storage_call("Failed to query by riders"):
            resp = self._table.query(
                IndexName=self._index_name,
                KeyConditionExpression=condition,
                ExpressionAttributeValues=values,
                Limit=query.limit,
                ScanIndexForward=False,
            )
        return self._page(resp)

    # ---- update ----

    def _update(self, key: JsonDict, data: PartialUpdate, message: str) -> JsonDict:
        fields = data.provided_fields()
        if not fields:
            raise StorageError("No fields to update")

        with _storage_call(message):
            resp = self._table.update_item(
                Key=key,
                ReturnValues="ALL_NEW",
                **build_update_expression(fields),
            )
        return _decode_decimals(resp.get("Attributes", {}))

    def update_static(self, lift: str, data: UpdateStaticDataInput) -> JsonDict:
        return self._update(
            {"Lift": lift, "Metadata": STATIC_METADATA}, data, "Failed to update static data"
        )

    def update_dynamic(self, lift: str, metadata: str, data: UpdateDynamicDataInput) -> JsonDict:
        return self._update(
            {"Lift": lift, "Metadata": metadata}, data, "Failed to update dynamic data"
        )

    # ---- delete ----

    def delete(self, lift: str, metadata: str) -> None:
        with _storage_call("Failed to delete ski lift data"):
            self._table.delete_item(Key={"Lift": lift, "Metadata": metadata})

    def check_ready(self) -> str:
        """Return the table status reported by DescribeTable."""
        with _storage_call("DynamoDB table is not reachable"):
            resp = self._ddb.meta.client.describe_table(TableName=self._table_name)
        return resp["Table"]["TableStatus"]
