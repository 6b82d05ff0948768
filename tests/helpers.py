"""Table helpers shared by unit and integration tests."""

from __future__ import annotations

from typing import Any

REGION = "us-east-1"
TABLE_NAME = "SkiLifts-test"
INDEX_NAME = "SkiLiftsByRiders"


def create_skilifts_table(client, name: str = TABLE_NAME, index: str = INDEX_NAME) -> None:
    """Create a table with the Lift/Metadata key and the rider GSI."""
    client.create_table(
        TableName=name,
        KeySchema=[
            {"AttributeName": "Lift", "KeyType": "HASH"},
            {"AttributeName": "Metadata", "KeyType": "RANGE"},
        ],
        AttributeDefinitions=[
            {"AttributeName": "Lift", "AttributeType": "S"},
            {"AttributeName": "Metadata", "AttributeType": "S"},
            {"AttributeName": "TotalUniqueLiftRiders", "AttributeType": "N"},
        ],
        GlobalSecondaryIndexes=[
            {
                "IndexName": index,
                "KeySchema": [
                    {"AttributeName": "Lift", "KeyType": "HASH"},
                    {"AttributeName": "TotalUniqueLiftRiders", "KeyType": "RANGE"},
                ],
                "Projection": {"ProjectionType": "INCLUDE", "NonKeyAttributes": ["Metadata"]},
            },
        ],
        BillingMode="PAY_PER_REQUEST",
    )


def put_items(ddb, items: list[dict[str, Any]], table_name: str = TABLE_NAME) -> None:
    table = ddb.Table(table_name)
    for item in items:
        table.put_item(Item=item)
