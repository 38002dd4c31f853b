"""SQLite connection handling, schema setup and startup connectivity checks."""

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

import aiosqlite

from taskflow.core.errors import StoreError


logger = logging.getLogger(__name__)


SCHEMA_STATEMENTS = (
    """
    CREATE TABLE IF NOT EXISTS tasks (
        id TEXT PRIMARY KEY,
        title TEXT NOT NULL CHECK (length(title) <= 200),
        description TEXT CHECK (description IS NULL OR length(description) <= 1000),
        status TEXT NOT NULL,
        priority TEXT NOT NULL,
        created_date TEXT NOT NULL,
        updated_date TEXT NOT NULL,
        due_date TEXT
    )
    """,
    "CREATE INDEX IF NOT EXISTS idx_tasks_created_date ON tasks (created_date)",
    "CREATE INDEX IF NOT EXISTS idx_tasks_status ON tasks (status)",
)


def get_db_path(db_path: str | Path) -> Path:
    """Get the resolved SQLite database file path."""
    return Path(db_path).resolve()


@asynccontextmanager
async def open_connection(db_path: str | Path) -> AsyncIterator[aiosqlite.Connection]:
    """Open a configured connection to the SQLite database.

    Raises:
        StoreError: If the database file cannot be opened
    """
    path = get_db_path(db_path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        conn = await aiosqlite.connect(str(path))
        await conn.execute("PRAGMA journal_mode = WAL")
    except (OSError, aiosqlite.Error) as e:
        logger.error("open_connection_failed", extra={"db_path": str(path), "error": str(e)})
        msg = f"Failed to open database at {path}: {e}"
        raise StoreError(msg) from e

    try:
        yield conn
    finally:
        await conn.close()


async def init_db(*, db_path: str | Path) -> None:
    """Create the tasks table and its indexes if they do not exist."""
    async with open_connection(db_path) as conn:
        try:
            for statement in SCHEMA_STATEMENTS:
                await conn.execute(statement)
            await conn.commit()
        except aiosqlite.Error as e:
            logger.error("init_db_failed", extra={"db_path": str(db_path), "error": str(e)})
            msg = f"Failed to initialize database schema: {e}"
            raise StoreError(msg) from e

    logger.info("Database schema initialized", extra={"db_path": str(get_db_path(db_path))})


async def ping(*, db_path: str | Path) -> None:
    """Run a trivial query to verify the database is reachable.

    Raises:
        StoreError: If the database cannot be queried
    """
    async with open_connection(db_path) as conn:
        try:
            await conn.execute("SELECT 1")
        except aiosqlite.Error as e:
            msg = f"Database ping failed: {e}"
            raise StoreError(msg) from e


async def wait_for_database(*, db_path: str | Path, max_retries: int, retry_delay_seconds: float) -> None:
    """Block application startup until the database answers, retrying on failure.

    Args:
        db_path: SQLite database path
        max_retries: Maximum number of connection attempts
        retry_delay_seconds: Delay between attempts

    Raises:
        StoreError: If the database is still unreachable after the last attempt
    """
    for attempt in range(1, max_retries + 1):
        logger.info(
            "Attempting to connect to database",
            extra={"attempt": attempt, "max_retries": max_retries},
        )
        try:
            await ping(db_path=db_path)
        except StoreError as e:
            if attempt >= max_retries:
                logger.critical(
                    "Failed to connect to database",
                    extra={"max_retries": max_retries, "error": str(e)},
                )
                raise
            logger.warning(
                "Database connection failed, retrying",
                extra={
                    "attempt": attempt,
                    "max_retries": max_retries,
                    "retry_delay_seconds": retry_delay_seconds,
                    "error": str(e),
                },
            )
            await asyncio.sleep(retry_delay_seconds)
        else:
            logger.info("Database connection successful", extra={"attempt": attempt})
            return
