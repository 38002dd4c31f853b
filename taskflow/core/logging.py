"""Logging and observability configuration using Pydantic Logfire.

All modules should use Python's standard logging library (logging.getLogger(__name__)),
and Logfire will capture and enrich these logs.

Standard usage:
    import logging
    logger = logging.getLogger(__name__)
    logger.info("Message", extra={"key": "value"})
"""

import logging

import logfire
from fastapi import FastAPI

from taskflow.core.config import Settings, constants


def configure_logfire(app_settings: Settings) -> None:
    """Configure Pydantic Logfire and route standard logging records through it."""
    logfire.configure(
        token=app_settings.logfire_token,
        service_name="taskflow",
        service_version=constants.API_VERSION,
        environment=app_settings.environment,
        send_to_logfire="if-token-present",
    )
    logging.basicConfig(level=logging.INFO, handlers=[logfire.LogfireLoggingHandler()])

    logger = logging.getLogger(__name__)
    logger.info("Logfire configured successfully")


def instrument_fastapi(app: FastAPI) -> None:
    """Add Logfire request tracing to a FastAPI application."""
    logfire.instrument_fastapi(app)
    logger = logging.getLogger(__name__)
    logger.info("FastAPI instrumentation configured")


def span(name: str, **attributes: object) -> logfire.LogfireSpan:
    """Create a custom span for service layer functions.

    Usage:
        with span("task_service.create"):
            ...
    """
    return logfire.span(name, **attributes)
