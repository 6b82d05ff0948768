"""Build a boto3 DynamoDB resource for local or remote mode."""

from __future__ import annotations

import logging
from typing import Any

import boto3

from skilifts.core.config import DynamoDBConfig

logger = logging.getLogger(__name__)

LOCAL_CREDENTIALS = {"aws_access_key_id": "dummy", "aws_secret_access_key": "dummy"}


def dynamodb_client_kwargs(config: DynamoDBConfig) -> dict[str, Any]:
    """Keyword arguments for ``boto3.resource("dynamodb", ...)``."""
    kwargs: dict[str, Any] = {"region_name": config.region}
    if config.mode == "local":
        kwargs["endpoint_url"] = config.endpoint_url
        kwargs.update(LOCAL_CREDENTIALS)
    elif config.access_key_id and config.secret_access_key:
        kwargs["aws_access_key_id"] = config.access_key_id
        kwargs["aws_secret_access_key"] = config.secret_access_key
    return kwargs


def create_dynamodb_resource(config: DynamoDBConfig):
    logger.info("Initializing DynamoDB client in %s mode (region: %s)", config.mode, config.region)
    return boto3.resource("dynamodb", **dynamodb_client_kwargs(config))
