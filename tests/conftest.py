"""Pytest configuration and shared fixtures."""

from collections.abc import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from taskflow.core.config import Settings
from taskflow.main import create_app


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """Settings for an isolated in-memory application without sample data."""
    return Settings(
        store_backend="memory",
        sqlite_db_path=str(tmp_path / "taskflow.db"),
        seed_sample_data=False,
        db_connect_max_retries=1,
        db_connect_retry_delay_seconds=0,
        logfire_token=None,
        environment="test",
    )


@pytest.fixture
def app(test_settings: Settings) -> FastAPI:
    """Provide a FastAPI application built from the test settings."""
    return create_app(test_settings)


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    """Provide a test client with the application lifespan running."""
    with TestClient(app) as test_client:
        yield test_client
