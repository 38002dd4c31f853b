"""Task persistence: the store protocol plus SQLite and in-memory implementations."""

import logging
from pathlib import Path
from typing import Any, Protocol
from uuid import UUID

import aiosqlite

from taskflow.core import db_client
from taskflow.core.errors import StoreError
from taskflow.domain.task import Task, TaskStatus


logger = logging.getLogger(__name__)


class TaskStore(Protocol):
    """Durable record keeper for tasks, keyed by id.

    Listings are ordered by creation time (oldest first, ties in insertion
    order). Every call reads fresh state and commits on its own.
    """

    async def list_all(self) -> list[Task]: ...

    async def list_by_status(self, status: TaskStatus) -> list[Task]: ...

    async def get_by_id(self, task_id: UUID) -> Task | None: ...

    async def insert(self, task: Task) -> Task: ...

    async def replace(self, task: Task) -> Task: ...

    async def delete(self, task_id: UUID) -> bool: ...

    async def exists(self, task_id: UUID) -> bool: ...

    async def count(self) -> int: ...

    async def ping(self) -> None: ...


_COLUMNS = ("id", "title", "description", "status", "priority", "created_date", "updated_date", "due_date")
_SELECT = f"SELECT {', '.join(_COLUMNS)} FROM tasks"  # noqa: S608 - fixed column list
_ORDER = "ORDER BY created_date ASC, rowid ASC"


def _to_row(task: Task) -> dict[str, Any]:
    """Flatten a task into column values (ISO-8601 text timestamps)."""
    return {
        "id": str(task.id),
        "title": task.title,
        "description": task.description,
        "status": task.status.value,
        "priority": task.priority.value,
        "created_date": task.created_date.isoformat(timespec="microseconds"),
        "updated_date": task.updated_date.isoformat(timespec="microseconds"),
        "due_date": task.due_date.isoformat(timespec="microseconds") if task.due_date else None,
    }


def _from_row(row: tuple[Any, ...]) -> Task:
    return Task.model_validate(dict(zip(_COLUMNS, row, strict=True)))


class SqliteTaskStore:
    """Task store backed by a SQLite table."""

    def __init__(self, db_path: str | Path) -> None:
        self._db_path = db_path

    async def _fetch_all(self, query: str, params: tuple[Any, ...] = ()) -> list[Task]:
        async with db_client.open_connection(self._db_path) as conn:
            try:
                cursor = await conn.execute(query, params)
                rows = await cursor.fetchall()
            except aiosqlite.Error as e:
                logger.error("task_query_failed", extra={"error": str(e)})
                msg = f"Failed to read tasks: {e}"
                raise StoreError(msg) from e
        return [_from_row(row) for row in rows]

    async def _execute(self, query: str, params: tuple[Any, ...] | dict[str, Any]) -> int:
        """Run a write statement, commit it and return the affected row count."""
        async with db_client.open_connection(self._db_path) as conn:
            try:
                cursor = await conn.execute(query, params)
                await conn.commit()
            except (aiosqlite.Error, UnicodeEncodeError) as e:
                logger.error("task_write_failed", extra={"error": str(e)})
                msg = f"Failed to write tasks: {e}"
                raise StoreError(msg) from e
            return cursor.rowcount

    async def list_all(self) -> list[Task]:
        return await self._fetch_all(f"{_SELECT} {_ORDER}")

    async def list_by_status(self, status: TaskStatus) -> list[Task]:
        return await self._fetch_all(f"{_SELECT} WHERE status = ? {_ORDER}", (status.value,))

    async def get_by_id(self, task_id: UUID) -> Task | None:
        tasks = await self._fetch_all(f"{_SELECT} WHERE id = ?", (str(task_id),))
        return tasks[0] if tasks else None

    async def insert(self, task: Task) -> Task:
        placeholders = ", ".join(f":{column}" for column in _COLUMNS)
        await self._execute(f"INSERT INTO tasks ({', '.join(_COLUMNS)}) VALUES ({placeholders})", _to_row(task))
        logger.info("Inserted task", extra={"task_id": str(task.id)})
        return task

    async def replace(self, task: Task) -> Task:
        assignments = ", ".join(f"{column} = :{column}" for column in _COLUMNS if column != "id")
        rowcount = await self._execute(f"UPDATE tasks SET {assignments} WHERE id = :id", _to_row(task))  # noqa: S608
        if rowcount == 0:
            msg = f"Cannot replace task {task.id}: no such row"
            raise StoreError(msg)
        logger.info("Replaced task", extra={"task_id": str(task.id)})
        return task

    async def delete(self, task_id: UUID) -> bool:
        rowcount = await self._execute("DELETE FROM tasks WHERE id = ?", (str(task_id),))
        return rowcount > 0

    async def exists(self, task_id: UUID) -> bool:
        return await self.get_by_id(task_id) is not None

    async def count(self) -> int:
        async with db_client.open_connection(self._db_path) as conn:
            try:
                cursor = await conn.execute("SELECT COUNT(*) FROM tasks")
                row = await cursor.fetchone()
            except aiosqlite.Error as e:
                msg = f"Failed to count tasks: {e}"
                raise StoreError(msg) from e
        return row[0] if row else 0

    async def ping(self) -> None:
        await db_client.ping(db_path=self._db_path)


class InMemoryTaskStore:
    """Dict-backed task store for local development and tests.

    Returns copies so callers cannot mutate stored state.
    """

    def __init__(self) -> None:
        self._tasks: dict[UUID, Task] = {}

    def _ordered(self) -> list[Task]:
        # dict preserves insertion order, so the sort is stable on ties
        return sorted(self._tasks.values(), key=lambda t: t.created_date)

    async def list_all(self) -> list[Task]:
        return [t.model_copy() for t in self._ordered()]

    async def list_by_status(self, status: TaskStatus) -> list[Task]:
        return [t.model_copy() for t in self._ordered() if t.status == status]

    async def get_by_id(self, task_id: UUID) -> Task | None:
        task = self._tasks.get(task_id)
        return task.model_copy() if task else None

    async def insert(self, task: Task) -> Task:
        if task.id in self._tasks:
            msg = f"Task {task.id} already exists"
            raise StoreError(msg)
        self._tasks[task.id] = task.model_copy()
        return task

    async def replace(self, task: Task) -> Task:
        if task.id not in self._tasks:
            msg = f"Cannot replace task {task.id}: no such record"
            raise StoreError(msg)
        self._tasks[task.id] = task.model_copy()
        return task

    async def delete(self, task_id: UUID) -> bool:
        return self._tasks.pop(task_id, None) is not None

    async def exists(self, task_id: UUID) -> bool:
        return task_id in self._tasks

    async def count(self) -> int:
        return len(self._tasks)

    async def ping(self) -> None:
        return None
