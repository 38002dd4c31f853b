"""Demonstration data for an empty task store."""

import logging
import uuid
from datetime import timedelta

from taskflow.core.clock import utc_now
from taskflow.domain.task import Task, TaskPriority, TaskStatus
from taskflow.services.task_store import TaskStore


logger = logging.getLogger(__name__)


# (title, description, status, priority, created days ago, updated days ago, due in days)
SAMPLE_TASKS: list[tuple[str, str, TaskStatus, TaskPriority, int, int, int | None]] = [
    (
        "Set up development environment",
        "Install necessary tools and configure the development workspace",
        TaskStatus.DONE,
        TaskPriority.HIGH,
        5,
        4,
        None,
    ),
    (
        "Design database schema",
        "Create entity relationship diagrams and design the database structure",
        TaskStatus.DONE,
        TaskPriority.HIGH,
        4,
        3,
        None,
    ),
    (
        "Implement API endpoints",
        "Create REST API endpoints for CRUD operations on tasks",
        TaskStatus.IN_PROGRESS,
        TaskPriority.HIGH,
        3,
        1,
        2,
    ),
    (
        "Write unit tests",
        "Create comprehensive unit tests for all business logic",
        TaskStatus.TODO,
        TaskPriority.MEDIUM,
        2,
        2,
        5,
    ),
    (
        "Set up CI/CD pipeline",
        "Configure automated build and deployment pipeline",
        TaskStatus.TODO,
        TaskPriority.MEDIUM,
        1,
        1,
        7,
    ),
    (
        "Create documentation",
        "Write API documentation and user guides",
        TaskStatus.TODO,
        TaskPriority.LOW,
        0,
        0,
        10,
    ),
]


def build_sample_tasks() -> list[Task]:
    """Build the sample tasks relative to the current time."""
    now = utc_now()
    tasks = []
    for title, description, status, priority, created_ago, updated_ago, due_in in SAMPLE_TASKS:
        tasks.append(
            Task(
                id=uuid.uuid4(),
                title=title,
                description=description,
                status=status,
                priority=priority,
                created_date=now - timedelta(days=created_ago),
                updated_date=now - timedelta(days=updated_ago),
                due_date=now + timedelta(days=due_in) if due_in is not None else None,
            )
        )
    return tasks


async def seed_sample_tasks(store: TaskStore) -> int:
    """Insert the sample tasks if the store is empty.

    Returns:
        Number of tasks inserted (0 when the store already has data)
    """
    if await store.count() > 0:
        logger.info("Task store already populated, skipping seed")
        return 0

    tasks = build_sample_tasks()
    for task in tasks:
        await store.insert(task)

    logger.info("Seeded sample tasks", extra={"count": len(tasks)})
    return len(tasks)
