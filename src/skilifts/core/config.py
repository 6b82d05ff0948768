"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class DynamoDBConfig(BaseSettings):
    """DynamoDB configuration."""

    model_config = {"env_prefix": "SKILIFTS_DYNAMO_"}

    mode: Literal["local", "remote"] = "local"
    region: str = "us-east-1"
    endpoint_url: str = "http://localhost:8000"  # only used in local mode
    access_key_id: str | None = None
    secret_access_key: str | None = None
    table_name: str = "SkiLifts"
    index_name: str = "SkiLiftsByRiders"


class ServerConfig(BaseSettings):
    """HTTP server configuration."""

    model_config = {"env_prefix": "SKILIFTS_SERVER_"}

    host: str = "0.0.0.0"
    port: int = 3000
    cors_origin: str = "*"


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "SKILIFTS_"}

    environment: Literal["development", "production", "test"] = "development"
    log_level: str = "INFO"

    dynamodb: DynamoDBConfig = DynamoDBConfig()
    server: ServerConfig = ServerConfig()
