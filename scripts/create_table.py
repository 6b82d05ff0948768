"""Create the SkiLifts table (and its rider index), optionally seeding sample data.

Usage:
    python scripts/create_table.py --endpoint-url http://localhost:8000 --seed
"""

from __future__ import annotations

import argparse
from decimal import Decimal
from typing import Any

import boto3

TABLE_NAME = "SkiLifts"
INDEX_NAME = "SkiLiftsByRiders"

SAMPLE_RECORDS: list[dict[str, Any]] = [
    {
        "Lift": "Summit Express", "Metadata": "Static Data",
        "ExperiencedRidersOnly": False, "VerticalFeet": 2500, "LiftTime": "8:00",
    },
    {
        "Lift": "Black Diamond Lift", "Metadata": "Static Data",
        "ExperiencedRidersOnly": True, "VerticalFeet": 3200, "LiftTime": "10:30",
    },
    {
        "Lift": "Summit Express", "Metadata": "01/15/24",
        "TotalUniqueLiftRiders": 1250, "AverageSnowCoverageInches": 48,
        "LiftStatus": "Open", "AvalancheDanger": "Low",
    },
    {
        "Lift": "Summit Express", "Metadata": "01/16/24",
        "TotalUniqueLiftRiders": 0, "AverageSnowCoverageInches": 12,
        "LiftStatus": "Closed", "AvalancheDanger": "High",
    },
    {
        "Lift": "Black Diamond Lift", "Metadata": "01/15/24",
        "TotalUniqueLiftRiders": 640, "AverageSnowCoverageInches": Decimal("51.5"),
        "LiftStatus": "Open", "AvalancheDanger": "Considerable",
    },
    {
        "Lift": "Resort Data", "Metadata": "01/15/24",
        "TotalUniqueLiftRiders": 8500, "AverageSnowCoverageInches": 42,
        "AvalancheDanger": "Moderate", "OpenLifts": [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12],
    },
    {
        "Lift": "Resort Data", "Metadata": "01/16/24",
        "TotalUniqueLiftRiders": 1200, "AverageSnowCoverageInches": 15,
        "AvalancheDanger": "High", "OpenLifts": [1, 2, 3],
    },
]


def create_table(ddb: Any, table_name: str = TABLE_NAME, index_name: str = INDEX_NAME) -> bool:
    """Create the table with its rider index. Returns False if it already exists."""
    client = ddb.meta.client
    if table_name in client.list_tables().get("TableNames", []):
        print(f"  Table {table_name} already exists, skipping")
        return False

    client.create_table(
        TableName=table_name,
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
                "IndexName": index_name,
                "KeySchema": [
                    {"AttributeName": "Lift", "KeyType": "HASH"},
                    {"AttributeName": "TotalUniqueLiftRiders", "KeyType": "RANGE"},
                ],
                "Projection": {"ProjectionType": "INCLUDE", "NonKeyAttributes": ["Metadata"]},
                "ProvisionedThroughput": {"ReadCapacityUnits": 5, "WriteCapacityUnits": 5},
            },
        ],
        ProvisionedThroughput={"ReadCapacityUnits": 5, "WriteCapacityUnits": 5},
    )
    print(f"  Created table {table_name} with index {index_name}")
    return True


def seed_sample_data(ddb: Any, table_name: str = TABLE_NAME) -> int:
    """Write the sample records. Returns the number of items written."""
    tbl = ddb.Table(table_name)
    with tbl.batch_writer() as batch:
        for item in SAMPLE_RECORDS:
            batch.put_item(Item=item)
    print(f"  Seeded {len(SAMPLE_RECORDS)} sample records")
    return len(SAMPLE_RECORDS)


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--endpoint-url", default="http://localhost:8000")
    parser.add_argument("--region", default="us-east-1")
    parser.add_argument("--table-name", default=TABLE_NAME)
    parser.add_argument("--seed", action="store_true", help="write sample records")
    args = parser.parse_args()

    ddb = boto3.resource(
        "dynamodb",
        region_name=args.region,
        endpoint_url=args.endpoint_url,
        aws_access_key_id="dummy",
        aws_secret_access_key="dummy",
    )

    print("Creating table...")
    create_table(ddb, table_name=args.table_name)
    if args.seed:
        print("Seeding sample data...")
        seed_sample_data(ddb, table_name=args.table_name)
    print("Done.")


if __name__ == "__main__":
    main()
