"""Error types and HTTP error classification for taskflow."""

from uuid import UUID

from pydantic import BaseModel

from taskflow.core.config import constants


class TaskFlowError(Exception):
    """Base class for taskflow errors."""


class StoreError(TaskFlowError):
    """Persistence failure (connectivity loss, constraint violation)."""


class TaskNotFoundError(TaskFlowError):
    """An update referenced a task id with no matching record."""

    def __init__(self, task_id: UUID) -> None:
        self.task_id = task_id
        super().__init__(f"Task with id {task_id} not found")


class ErrorCode:
    """Error codes returned in error response bodies."""

    ERR_TASK_NOT_FOUND = "ERR_TASK_NOT_FOUND"
    ERR_STORE_UNAVAILABLE = "ERR_STORE_UNAVAILABLE"
    ERR_UNKNOWN = "ERR_UNKNOWN"


class ErrorResponse(BaseModel):
    """Structured error body."""

    code: str
    message: str


def not_found_response(task_id: UUID) -> ErrorResponse:
    """Build the error body for a missing task."""
    return ErrorResponse(code=ErrorCode.ERR_TASK_NOT_FOUND, message=f"Task with ID {task_id} not found")


def classify_error(exception: Exception) -> tuple[int, ErrorResponse]:
    """Map an exception raised below the HTTP layer to a status code and error body.

    Store failures are reported with a generic message; the underlying detail is
    for logs only.

    Args:
        exception: The exception raised while handling a request

    Returns:
        Tuple of (HTTP status code, ErrorResponse)
    """
    if isinstance(exception, TaskNotFoundError):
        return constants.HTTP_NOT_FOUND, not_found_response(exception.task_id)

    if isinstance(exception, StoreError):
        return (
            constants.HTTP_SERVER_ERROR,
            ErrorResponse(
                code=ErrorCode.ERR_STORE_UNAVAILABLE,
                message="The task store could not complete the request.",
            ),
        )

    return (
        constants.HTTP_SERVER_ERROR,
        ErrorResponse(code=ErrorCode.ERR_UNKNOWN, message="An unexpected error occurred."),
    )
