"""DynamoDB persistence for ski lift records."""

from __future__ import annotations

from skilifts.core.config import AppSettings
from skilifts.persistence.client import create_dynamodb_resource
from skilifts.persistence.dynamodb_backend import DynamoDBSkiLiftStore


def create_persistence(settings: AppSettings | None = None) -> DynamoDBSkiLiftStore:
    """Create the wired-up record store from application settings."""
    if settings is None:
        settings = AppSettings()

    resource = create_dynamodb_resource(settings.dynamodb)
    return DynamoDBSkiLiftStore(
        resource,
        table_name=settings.dynamodb.table_name,
        index_name=settings.dynamodb.index_name,
    )


__all__ = ["DynamoDBSkiLiftStore", "create_dynamodb_resource", "create_persistence"]
