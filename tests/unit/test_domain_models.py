"""Tests for task domain models and request payload validation."""

import uuid
from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from taskflow.domain import Task, TaskCreate, TaskPriority, TaskStatus, TaskUpdate


@pytest.mark.unit
class TestTaskCreate:
    """Tests for the creation draft."""

    def test_defaults(self):
        draft = TaskCreate(title="Write spec")

        assert draft.description is None
        assert draft.status == TaskStatus.TODO
        assert draft.priority == TaskPriority.MEDIUM
        assert draft.due_date is None

    def test_title_is_trimmed(self):
        assert TaskCreate(title="  Write spec  ").title == "Write spec"

    @pytest.mark.parametrize("title", ["", "   ", "\t\n"])
    def test_blank_title_rejected(self, title):
        with pytest.raises(ValidationError, match="Title must not be empty"):
            TaskCreate(title=title)

    def test_title_length_limit(self):
        assert len(TaskCreate(title="x" * 200).title) == 200

        with pytest.raises(ValidationError, match="at most 200"):
            TaskCreate(title="x" * 201)

    def test_title_limit_applies_after_trimming(self):
        assert TaskCreate(title=" " + "x" * 200 + " ").title == "x" * 200

    def test_description_length_limit(self):
        assert TaskCreate(title="t", description="d" * 1000).description == "d" * 1000

        with pytest.raises(ValidationError):
            TaskCreate(title="t", description="d" * 1001)

    def test_title_required(self):
        with pytest.raises(ValidationError):
            TaskCreate.model_validate({"description": "no title"})

    def test_accepts_camel_case_payload(self):
        draft = TaskCreate.model_validate(
            {"title": "Ship it", "status": "InProgress", "priority": "High", "dueDate": "2030-01-01T09:00:00Z"}
        )

        assert draft.status == TaskStatus.IN_PROGRESS
        assert draft.priority == TaskPriority.HIGH
        assert draft.due_date == datetime(2030, 1, 1, 9, 0, tzinfo=UTC)

    @pytest.mark.parametrize("field,value", [("status", "Archived"), ("priority", "Urgent"), ("status", 7)])
    def test_enum_values_are_closed(self, field, value):
        with pytest.raises(ValidationError):
            TaskCreate.model_validate({"title": "t", field: value})

    def test_accepts_ordinal_status_and_priority(self):
        draft = TaskCreate.model_validate({"title": "t", "description": "", "status": 1, "priority": 2})

        assert draft.status == TaskStatus.IN_PROGRESS
        assert draft.priority == TaskPriority.HIGH

    @pytest.mark.parametrize("field,value", [("status", 3), ("priority", -1), ("status", True)])
    def test_out_of_range_ordinals_rejected(self, field, value):
        with pytest.raises(ValidationError):
            TaskCreate.model_validate({"title": "t", field: value})

    def test_lone_surrogate_in_title_rejected(self):
        with pytest.raises(ValidationError, match="Title must be valid UTF-8"):
            TaskCreate(title="x\ud800")

    def test_lone_surrogate_in_description_rejected(self):
        with pytest.raises(ValidationError):
            TaskCreate(title="t", description="x\ud800")


@pytest.mark.unit
class TestTaskUpdate:
    """Tests for the full-replacement update payload."""

    def test_status_and_priority_required(self):
        with pytest.raises(ValidationError) as exc_info:
            TaskUpdate.model_validate({"title": "t"})

        missing = {error["loc"][0] for error in exc_info.value.errors()}
        assert missing == {"status", "priority"}

    def test_blank_title_rejected(self):
        with pytest.raises(ValidationError, match="Title must not be empty"):
            TaskUpdate(title=" ", status=TaskStatus.DONE, priority=TaskPriority.LOW)

    def test_optional_fields_default_to_none(self):
        changes = TaskUpdate(title="t", status=TaskStatus.DONE, priority=TaskPriority.LOW)

        assert changes.description is None
        assert changes.due_date is None

    def test_accepts_ordinal_strings(self):
        changes = TaskUpdate.model_validate({"title": "t", "status": "2", "priority": "0"})

        assert changes.status == TaskStatus.DONE
        assert changes.priority == TaskPriority.LOW

    def test_lone_surrogate_in_description_rejected(self):
        with pytest.raises(ValidationError):
            TaskUpdate(title="t", description="\udfff", status=TaskStatus.DONE, priority=TaskPriority.LOW)


@pytest.mark.unit
class TestTask:
    """Tests for the Task model."""

    def test_serializes_with_camel_case_names(self):
        now = datetime(2025, 1, 1, tzinfo=UTC)
        task = Task(id=uuid.uuid4(), title="t", created_date=now, updated_date=now)

        data = task.model_dump(by_alias=True, mode="json")

        assert set(data) == {
            "id",
            "title",
            "description",
            "status",
            "priority",
            "createdDate",
            "updatedDate",
            "dueDate",
        }
        assert data["status"] == "Todo"
        assert data["priority"] == "Medium"

    def test_rejects_unknown_status(self):
        now = datetime(2025, 1, 1, tzinfo=UTC)
        with pytest.raises(ValidationError):
            Task(id=uuid.uuid4(), title="t", status="Blocked", created_date=now, updated_date=now)
