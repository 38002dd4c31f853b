"""taskflow - task tracking REST API."""

import json
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from taskflow.core import db_client
from taskflow.core.clock import utc_now
from taskflow.core.config import Settings, constants, settings
from taskflow.core.errors import StoreError, TaskFlowError, TaskNotFoundError, classify_error
from taskflow.core.logging import configure_logfire, instrument_fastapi
from taskflow.interface.tasks_router import router as tasks_router
from taskflow.services.seed_service import seed_sample_tasks
from taskflow.services.task_service import TaskService
from taskflow.services.task_store import InMemoryTaskStore, SqliteTaskStore, TaskStore


logger = logging.getLogger(__name__)


async def build_store(app_settings: Settings) -> TaskStore:
    """Create the configured task store, waiting for the database when needed.

    Raises:
        StoreError: If the database stays unreachable after all retries
    """
    if app_settings.store_backend == "memory":
        logger.info("Using in-memory task store")
        return InMemoryTaskStore()

    logger.info("Using SQLite task store", extra={"db_path": app_settings.sqlite_db_path})
    await db_client.wait_for_database(
        db_path=app_settings.sqlite_db_path,
        max_retries=app_settings.db_connect_max_retries,
        retry_delay_seconds=app_settings.db_connect_retry_delay_seconds,
    )
    await db_client.init_db(db_path=app_settings.sqlite_db_path)
    return SqliteTaskStore(app_settings.sqlite_db_path)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan context manager."""
    app_settings: Settings = app.state.settings

    logger.info("Starting TaskFlow API", extra={"environment": app_settings.environment})

    store = await build_store(app_settings)
    if app_settings.seed_sample_data:
        await seed_sample_tasks(store)

    app.state.task_store = store
    app.state.task_service = TaskService(store)
    logger.info("Task store initialized")
    yield
    logger.info("TaskFlow API stopped")


async def handle_taskflow_error(request: Request, exc: Exception) -> JSONResponse:
    """Translate core and store errors into JSON error responses."""
    status_code, body = classify_error(exc)
    if isinstance(exc, TaskNotFoundError):
        logger.warning("Task not found", extra={"path": request.url.path, "task_id": str(exc.task_id)})
    elif isinstance(exc, StoreError):
        logger.error("Task store failure", extra={"path": request.url.path, "error": str(exc)})
    else:
        logger.error("Unhandled taskflow error", extra={"path": request.url.path, "error": str(exc)})
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def handle_validation_error(request: Request, exc: RequestValidationError) -> Response:
    """Return request validation failures as 422.

    The body is ASCII-escaped JSON so that echoed input which is not valid
    UTF-8 (lone surrogates) can still be rendered.
    """
    errors = exc.errors()
    logger.info("Request validation failed", extra={"path": request.url.path, "error_count": len(errors)})
    body = json.dumps({"detail": jsonable_encoder(errors)}, separators=(",", ":"))
    return Response(content=body, status_code=constants.HTTP_UNPROCESSABLE_ENTITY, media_type="application/json")


async def health_check(request: Request) -> JSONResponse:
    """Health check endpoint with a task store connectivity probe."""
    store: TaskStore = request.app.state.task_store
    timestamp = utc_now().isoformat()
    try:
        await store.ping()
    except StoreError as e:
        logger.error("Health check failed", extra={"error": str(e)})
        return JSONResponse(
            content={"status": "Unhealthy", "timestamp": timestamp, "database": "Disconnected", "error": str(e)},
            status_code=constants.HTTP_SERVICE_UNAVAILABLE,
        )

    logger.info("Health check passed")
    return JSONResponse(
        content={"status": "Healthy", "timestamp": timestamp, "database": "Connected"},
        status_code=constants.HTTP_OK,
    )


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application for the given settings."""
    application = FastAPI(
        title=constants.API_TITLE,
        description="A task management API backed by SQLite",
        version=constants.API_VERSION,
        lifespan=lifespan,
    )
    application.state.settings = app_settings or settings

    application.add_middleware(
        CORSMiddleware,
        allow_origins=application.state.settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Logfire must be configured before instrumentation
    configure_logfire(application.state.settings)
    instrument_fastapi(application)

    application.add_exception_handler(TaskFlowError, handle_taskflow_error)
    application.add_exception_handler(RequestValidationError, handle_validation_error)
    application.include_router(tasks_router)
    application.add_api_route("/health", health_check, methods=["GET"], tags=["health"])
    return application


app = create_app()
