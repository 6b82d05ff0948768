"""Shared fixtures: a moto-backed SkiLifts table, store and API client."""

from __future__ import annotations

import boto3
import pytest
from fastapi.testclient import TestClient
from moto import mock_aws

from skilifts.api.app import create_app
from skilifts.core.config import AppSettings, DynamoDBConfig
from skilifts.persistence.dynamodb_backend import DynamoDBSkiLiftStore
from tests.helpers import INDEX_NAME, REGION, TABLE_NAME, create_skilifts_table


@pytest.fixture
def aws():
    with mock_aws():
        ddb = boto3.resource("dynamodb", region_name=REGION)
        create_skilifts_table(ddb.meta.client)
        yield ddb


@pytest.fixture
def store(aws):
    return DynamoDBSkiLiftStore(aws, table_name=TABLE_NAME, index_name=INDEX_NAME)


@pytest.fixture
def broken_store(aws):
    """Store bound to a table that does not exist; every call fails."""
    return DynamoDBSkiLiftStore(aws, table_name="NoSuchTable", index_name=INDEX_NAME)


@pytest.fixture
def settings():
    return AppSettings(
        environment="test",
        dynamodb=DynamoDBConfig(mode="remote", region=REGION, table_name=TABLE_NAME),
    )


@pytest.fixture
def client(settings, store):
    return TestClient(create_app(settings, store=store))


@pytest.fixture
def broken_client(settings, broken_store):
    return TestClient(create_app(settings, store=broken_store))
