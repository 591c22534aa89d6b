"""Configuration management for taskkeeper."""

from pathlib import Path

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

    # Validation Rules
    require_dates_on_create: bool = Field(
        default=False,
        description="Require both due date and completion date before a task can be created",
    )

    # Status Lifecycle
    strict_status_transitions: bool = Field(
        default=False,
        description="Treat Completed and Cancelled as terminal states",
    )

    # Sorting
    undated_tasks_first: bool = Field(
        default=True,
        description="Place tasks without a due date before dated tasks when sorting by due date",
    )

    # Storage Configuration
    storage_path: Path = Field(
        default_factory=lambda: Path.home() / ".taskkeeper" / "tasks.json",
        description="Path of the JSON file used as the task key-value store",
    )
    storage_key: str = Field(default="tasks", description="Key under which the task list is stored")

    # Pydantic Logfire Configuration (optional)
    logfire_token: str | None = Field(default=None, description="Pydantic Logfire token for observability")
    environment: str = Field(default="development", description="Deployment environment reported to Logfire")

    def require_storage_path(self) -> Path:
        """Return the storage path expanded and resolved.

        Raises:
            ValueError: If the configured path points at a directory
        """
        path = Path(self.storage_path).expanduser().resolve()
        if path.is_dir():
            raise ValueError(
                f"Storage path {path} is a directory. "
                "Set STORAGE_PATH environment variable or add to .env file."
            )
        return path


# Application Constants
class Constants:
    """Application-wide constants."""

    SERVICE_NAME: str = "taskkeeper"
    SERVICE_VERSION: str = "0.1.0"

    # Storage
    STORAGE_ENCODING: str = "utf-8"
    STORAGE_INDENT: int = 2
    TEMP_FILE_SUFFIX: str = ".tmp"
    CORRUPT_FILE_SUFFIX: str = ".corrupt"


def get_settings() -> Settings:
    """Get application settings (singleton pattern)."""
    return Settings()


# Global settings instance
settings = get_settings()
constants = Constants()
