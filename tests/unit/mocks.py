"""Test doubles for the task store."""

from uuid import UUID

from taskflow.core.errors import StoreError
from taskflow.domain.task import Task, TaskStatus


class FailingTaskStore:
    """Task store whose every operation fails like a lost database connection."""

    def __init__(self, message: str = "database is locked") -> None:
        self.message = message
        self.calls: list[str] = []

    def _fail(self, operation: str):
        self.calls.append(operation)
        raise StoreError(self.message)

    async def list_all(self) -> list[Task]:
        return self._fail("list_all")

    async def list_by_status(self, status: TaskStatus) -> list[Task]:
        return self._fail("list_by_status")

    async def get_by_id(self, task_id: UUID) -> Task | None:
        return self._fail("get_by_id")

    async def insert(self, task: Task) -> Task:
        return self._fail("insert")

    async def replace(self, task: Task) -> Task:
        return self._fail("replace")

    async def delete(self, task_id: UUID) -> bool:
        return self._fail("delete")

    async def exists(self, task_id: UUID) -> bool:
        return self._fail("exists")

    async def count(self) -> int:
        return self._fail("count")

    async def ping(self) -> None:
        self._fail("ping")
