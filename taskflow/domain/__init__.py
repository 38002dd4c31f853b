"""Domain models and DTOs."""

from taskflow.domain.create_models import TaskCreate
from taskflow.domain.task import Task, TaskPriority, TaskStatus
from taskflow.domain.update_models import TaskUpdate


__all__ = [
    "Task",
    "TaskCreate",
    "TaskPriority",
    "TaskStatus",
    "TaskUpdate",
]
