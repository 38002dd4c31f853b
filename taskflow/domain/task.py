"""Task domain model and enums."""

from collections.abc import Callable
from datetime import datetime
from enum import StrEnum
from typing import Annotated, Any
from uuid import UUID

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel


class TaskStatus(StrEnum):
    """Task progress. Any value may change to any other."""

    TODO = "Todo"
    IN_PROGRESS = "InProgress"
    DONE = "Done"


class TaskPriority(StrEnum):
    """Task priority."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


def accept_ordinal(enum_cls: type[StrEnum]) -> Callable[[Any], Any]:
    """Build a validator mapping a member's position (0, 1, 2 or "0", "1", "2") to the member.

    Clients of the web frontend send status and priority as ordinals. Names
    and out-of-range values are passed through for normal enum validation.
    """
    members = list(enum_cls)

    def _coerce(value: Any) -> Any:
        if isinstance(value, bool):
            return value
        if isinstance(value, str) and value.isdigit():
            value = int(value)
        if isinstance(value, int) and 0 <= value < len(members):
            return members[value]
        return value

    return _coerce


StatusInput = Annotated[TaskStatus, BeforeValidator(accept_ordinal(TaskStatus))]
PriorityInput = Annotated[TaskPriority, BeforeValidator(accept_ordinal(TaskPriority))]


class CamelModel(BaseModel):
    """Base model serialized with camelCase field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Task(CamelModel):
    """Task data transfer object."""

    id: UUID = Field(..., description="Unique task ID, assigned at creation")
    title: str = Field(..., description="Task title")
    description: str | None = Field(default=None, description="Detailed task description")
    status: TaskStatus = Field(default=TaskStatus.TODO, description="Current status")
    priority: TaskPriority = Field(default=TaskPriority.MEDIUM, description="Task priority")
    created_date: datetime = Field(..., description="Creation timestamp (UTC), never changes")
    updated_date: datetime = Field(..., description="Last update timestamp (UTC)")
    due_date: datetime | None = Field(default=None, description="Optional due date (UTC)")
