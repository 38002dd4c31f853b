"""REST endpoints for tasks."""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, Response, status
from fastapi.responses import JSONResponse

from taskflow.core.config import constants
from taskflow.core.errors import ErrorResponse, not_found_response
from taskflow.domain.create_models import TaskCreate
from taskflow.domain.task import StatusInput, Task
from taskflow.domain.update_models import TaskUpdate
from taskflow.services.task_service import TaskService


logger = logging.getLogger(__name__)

router = APIRouter(prefix=constants.TASKS_ROUTE_PREFIX, tags=["tasks"])

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}


def get_task_service(request: Request) -> TaskService:
    """Return the task service built at application startup."""
    return request.app.state.task_service


def _not_found(task_id: UUID) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=not_found_response(task_id).model_dump())


@router.get("", response_model=list[Task])
async def list_tasks(
    task_status: StatusInput | None = Query(default=None, alias="status"),
    service: TaskService = Depends(get_task_service),
) -> list[Task]:
    """List tasks in creation order, optionally filtered by status."""
    if task_status is None:
        return await service.list_all()
    return await service.list_by_status(task_status)


@router.get("/{task_id}", response_model=Task, responses=_NOT_FOUND)
async def get_task(task_id: UUID, service: TaskService = Depends(get_task_service)) -> Task | JSONResponse:
    """Get a single task."""
    task = await service.get_by_id(task_id)
    if task is None:
        logger.warning("Task not found", extra={"task_id": str(task_id)})
        return _not_found(task_id)
    return task


@router.post("", response_model=Task, status_code=status.HTTP_201_CREATED)
async def create_task(
    draft: TaskCreate,
    response: Response,
    service: TaskService = Depends(get_task_service),
) -> Task:
    """Create a task; the Location header points at the new resource."""
    task = await service.create(draft)
    response.headers["Location"] = f"{constants.TASKS_ROUTE_PREFIX}/{task.id}"
    return task


@router.put("/{task_id}", response_model=Task, responses=_NOT_FOUND)
async def update_task(
    task_id: UUID,
    changes: TaskUpdate,
    service: TaskService = Depends(get_task_service),
) -> Task:
    """Replace a task's mutable fields. A missing task surfaces as TaskNotFoundError (404)."""
    return await service.update(task_id, changes)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT, responses=_NOT_FOUND)
async def delete_task(task_id: UUID, service: TaskService = Depends(get_task_service)) -> Response:
    """Delete a task."""
    if not await service.delete(task_id):
        return _not_found(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
