"""Task service: identity and timestamp assignment over a task store."""

import logging
import uuid
from uuid import UUID

from taskflow.core.clock import ensure_utc, next_update_time, utc_now
from taskflow.core.errors import TaskNotFoundError
from taskflow.core.logging import span
from taskflow.domain.create_models import TaskCreate
from taskflow.domain.task import Task, TaskStatus
from taskflow.domain.update_models import TaskUpdate
from taskflow.services.task_store import TaskStore


logger = logging.getLogger(__name__)


class TaskService:
    """Owns every lifecycle field of a task; persistence is delegated to the store.

    Holds no state besides the store, so one instance can serve concurrent
    requests. Concurrent updates of the same task are last-write-wins.
    Store errors propagate unchanged and are never retried here.
    """

    def __init__(self, store: TaskStore) -> None:
        self._store = store

    async def list_all(self) -> list[Task]:
        """Return all tasks, oldest first."""
        with span("task_service.list_all"):
            tasks = await self._store.list_all()
            logger.info("Retrieved tasks", extra={"count": len(tasks)})
            return tasks

    async def list_by_status(self, status: TaskStatus) -> list[Task]:
        """Return tasks with the given status, oldest first."""
        with span("task_service.list_by_status", status=status.value):
            tasks = await self._store.list_by_status(status)
            logger.info("Retrieved tasks by status", extra={"status": status.value, "count": len(tasks)})
            return tasks

    async def get_by_id(self, task_id: UUID) -> Task | None:
        """Return the task with the given id, or None."""
        with span("task_service.get_by_id", task_id=str(task_id)):
            return await self._store.get_by_id(task_id)

    async def create(self, draft: TaskCreate) -> Task:
        """Create a task from a draft.

        Assigns a fresh id, sets created and updated dates to the current UTC
        time, and normalizes the due date to UTC.

        Args:
            draft: Validated creation payload

        Returns:
            The stored task

        Raises:
            StoreError: If the store rejects the insert
        """
        with span("task_service.create"):
            now = utc_now()
            task = Task(
                id=uuid.uuid4(),
                title=draft.title,
                description=draft.description,
                status=draft.status,
                priority=draft.priority,
                created_date=now,
                updated_date=now,
                due_date=ensure_utc(draft.due_date),
            )
            stored = await self._store.insert(task)
            logger.info("Created task", extra={"task_id": str(stored.id), "status": stored.status.value})
            return stored

    async def update(self, task_id: UUID, changes: TaskUpdate) -> Task:
        """Replace a task's mutable fields.

        Title, description, status, priority and due date are all taken from
        ``changes``; id and created date are kept; the updated date is
        refreshed and always moves forward.

        Args:
            task_id: Id of the task to update
            changes: Full set of mutable fields

        Returns:
            The stored task

        Raises:
            TaskNotFoundError: If no task has this id
            StoreError: If the store fails
        """
        with span("task_service.update", task_id=str(task_id)):
            current = await self._store.get_by_id(task_id)
            if current is None:
                logger.warning("Task not found for update", extra={"task_id": str(task_id)})
                raise TaskNotFoundError(task_id)

            task = current.model_copy(
                update={
                    "title": changes.title,
                    "description": changes.description,
                    "status": changes.status,
                    "priority": changes.priority,
                    "due_date": ensure_utc(changes.due_date),
                    "updated_date": next_update_time(current.updated_date),
                }
            )
            stored = await self._store.replace(task)
            logger.info("Updated task", extra={"task_id": str(task_id), "status": stored.status.value})
            return stored

    async def delete(self, task_id: UUID) -> bool:
        """Delete a task. Returns False when no task has this id."""
        with span("task_service.delete", task_id=str(task_id)):
            deleted = await self._store.delete(task_id)
            if deleted:
                logger.info("Deleted task", extra={"task_id": str(task_id)})
            else:
                logger.warning("Task not found for deletion", extra={"task_id": str(task_id)})
            return deleted
