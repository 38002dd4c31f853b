"""Configuration management for taskflow."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Store Configuration
    store_backend: Literal["sqlite", "memory"] = Field(
        default="sqlite", description="Task store backend ('sqlite' or 'memory' for local development)"
    )
    sqlite_db_path: str = Field(default="./data/taskflow.db", description="Path to the SQLite database file")

    # Startup connection retry
    db_connect_max_retries: int = Field(
        default=30, ge=1, description="Maximum attempts to reach the database during startup"
    )
    db_connect_retry_delay_seconds: float = Field(
        default=2.0, ge=0, description="Delay between database connection attempts (in seconds)"
    )

    # Sample data
    seed_sample_data: bool = Field(default=True, description="Insert demonstration tasks when the store is empty")

    # CORS Configuration
    cors_allow_origins: list[str] = Field(default=["*"], description="Origins allowed to call the API")

    # Pydantic Logfire Configuration (optional)
    logfire_token: str | None = Field(default=None, description="Pydantic Logfire token for observability")

    environment: str = Field(default="development", description="Deployment environment name")

    @property
    def is_production(self) -> bool:
        """Return True when running in the production environment."""
        return self.environment.lower() == "production"


# Application Constants
class Constants:
    """Application-wide constants."""

    # Task field limits
    TITLE_MAX_LENGTH: int = 200
    DESCRIPTION_MAX_LENGTH: int = 1000

    # HTTP Status Codes
    HTTP_OK: int = 200
    HTTP_NOT_FOUND: int = 404
    HTTP_UNPROCESSABLE_ENTITY: int = 422
    HTTP_SERVER_ERROR: int = 500
    HTTP_SERVICE_UNAVAILABLE: int = 503

    # API
    API_TITLE: str = "TaskFlow API"
    API_VERSION: str = "0.1.0"
    TASKS_ROUTE_PREFIX: str = "/api/tasks"


def get_settings() -> Settings:
    """Build application settings from the current environment."""
    return Settings()


# Global settings instance (read at application start)
settings = get_settings()
constants = Constants()
