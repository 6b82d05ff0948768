"""Tests for configuration defaults and env overrides."""

from __future__ import annotations

from skilifts.core.config import AppSettings, DynamoDBConfig, ServerConfig


def test_default_settings():
    settings = AppSettings()
    assert settings.log_level == "INFO"
    assert settings.dynamodb.table_name == "SkiLifts"
    assert settings.dynamodb.index_name == "SkiLiftsByRiders"


def test_dynamodb_config_defaults():
    config = DynamoDBConfig()
    assert config.mode == "local"
    assert config.region == "us-east-1"
    assert config.endpoint_url == "http://localhost:8000"


def test_dynamodb_config_env_override(monkeypatch):
    monkeypatch.setenv("SKILIFTS_DYNAMO_MODE", "remote")
    monkeypatch.setenv("SKILIFTS_DYNAMO_REGION", "us-west-2")
    monkeypatch.setenv("SKILIFTS_DYNAMO_TABLE_NAME", "SkiLifts-prod")
    config = DynamoDBConfig()
    assert config.mode == "remote"
    assert config.region == "us-west-2"
    assert config.table_name == "SkiLifts-prod"


def test_server_config_env_override(monkeypatch):
    monkeypatch.setenv("SKILIFTS_SERVER_PORT", "8080")
    monkeypatch.setenv("SKILIFTS_SERVER_CORS_ORIGIN", "https://ski.example.com")
    config = ServerConfig()
    assert config.port == 8080
    assert config.cors_origin == "https://ski.example.com"
