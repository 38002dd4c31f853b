"""Update models for task operations."""

from datetime import datetime

from pydantic import Field, field_validator

from taskflow.core.config import constants
from taskflow.domain.create_models import normalize_description, normalize_title
from taskflow.domain.task import CamelModel, PriorityInput, StatusInput


class TaskUpdate(CamelModel):
    """Full replacement of a task's mutable fields."""

    title: str = Field(..., description="Task title (1-200 characters)")
    description: str | None = Field(default=None, max_length=constants.DESCRIPTION_MAX_LENGTH)
    status: StatusInput
    priority: PriorityInput
    due_date: datetime | None = None

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        """Validate title is non-empty after trimming and within the length limit."""
        return normalize_title(v)

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: str | None) -> str | None:
        return normalize_description(v)
