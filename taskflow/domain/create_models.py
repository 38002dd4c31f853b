"""Pydantic models for creating tasks."""

from datetime import datetime

from pydantic import Field, field_validator

from taskflow.core.config import constants
from taskflow.domain.task import CamelModel, PriorityInput, StatusInput, TaskPriority, TaskStatus


def ensure_encodable(v: str, field_name: str) -> str:
    """Reject text that cannot be stored as UTF-8 (e.g. lone surrogates)."""
    try:
        v.encode("utf-8")
    except UnicodeEncodeError as e:
        msg = f"{field_name} must be valid UTF-8 text"
        raise ValueError(msg) from e
    return v


def normalize_title(v: str) -> str:
    """Trim a title and reject it if empty, too long or not encodable."""
    title = v.strip()
    if not title:
        msg = "Title must not be empty"
        raise ValueError(msg)
    if len(title) > constants.TITLE_MAX_LENGTH:
        msg = f"Title must be at most {constants.TITLE_MAX_LENGTH} characters"
        raise ValueError(msg)
    return ensure_encodable(title, "Title")


def normalize_description(v: str | None) -> str | None:
    if v is None:
        return None
    return ensure_encodable(v, "Description")


class TaskCreate(CamelModel):
    """Draft payload for creating a task."""

    title: str = Field(..., description="Task title (1-200 characters)")
    description: str | None = Field(
        default=None, max_length=constants.DESCRIPTION_MAX_LENGTH, description="Optional description"
    )
    status: StatusInput = Field(default=TaskStatus.TODO, description="Initial status")
    priority: PriorityInput = Field(default=TaskPriority.MEDIUM, description="Task priority")
    due_date: datetime | None = Field(default=None, description="Optional due date")

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        """Validate title is non-empty after trimming and within the length limit."""
        return normalize_title(v)

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: str | None) -> str | None:
        return normalize_description(v)
