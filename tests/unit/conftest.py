"""Pytest configuration and fixtures for unit tests."""

import uuid
from datetime import UTC, datetime

import pytest

from taskflow.core import db_client
from taskflow.domain.task import Task
from taskflow.services.task_service import TaskService
from taskflow.services.task_store import InMemoryTaskStore, SqliteTaskStore
from tests.unit.mocks import FailingTaskStore


@pytest.fixture
def in_memory_store() -> InMemoryTaskStore:
    """Provides a fresh InMemoryTaskStore for each test."""
    return InMemoryTaskStore()


@pytest.fixture
async def sqlite_store(tmp_path) -> SqliteTaskStore:
    """Provides a SqliteTaskStore on a fresh database file."""
    db_path = tmp_path / "tasks.db"
    await db_client.init_db(db_path=db_path)
    return SqliteTaskStore(db_path)


@pytest.fixture(params=["memory", "sqlite"])
async def task_store(request, tmp_path):
    """Runs a test against both store implementations."""
    if request.param == "memory":
        return InMemoryTaskStore()
    db_path = tmp_path / "tasks.db"
    await db_client.init_db(db_path=db_path)
    return SqliteTaskStore(db_path)


@pytest.fixture
def task_service(task_store) -> TaskService:
    """Provides a TaskService over each store implementation."""
    return TaskService(task_store)


@pytest.fixture
def failing_store() -> FailingTaskStore:
    return FailingTaskStore()


@pytest.fixture
def make_task():
    """Factory for fully-populated tasks.

    Usage:
        task = make_task(title="Test", created_date=datetime(2024, 1, 1, tzinfo=UTC))
    """

    def _make_task(**kwargs) -> Task:
        created = kwargs.pop("created_date", datetime(2024, 1, 1, 9, 0, tzinfo=UTC))
        data = {
            "id": kwargs.pop("id", None) or uuid.uuid4(),
            "title": "Sample task",
            "created_date": created,
            "updated_date": kwargs.pop("updated_date", created),
        }
        data.update(kwargs)
        return Task(**data)

    return _make_task
