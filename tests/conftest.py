"""Pytest configuration and shared fixtures."""

from pathlib import Path

import logfire
import pytest

from src.core.config import Settings


@pytest.fixture(scope="session", autouse=True)
def _local_logfire() -> None:
    """Keep spans and logs in-process during tests."""
    logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings with defaults and storage under a temporary directory."""
    return Settings(
        _env_file=None,
        require_dates_on_create=False,
        strict_status_transitions=False,
        undated_tasks_first=True,
        storage_path=tmp_path / "tasks.json",
        storage_key="tasks",
    )


@pytest.fixture
def storage_file(tmp_path: Path) -> Path:
    """Path of a JSON storage file that does not exist yet."""
    return tmp_path / "store" / "tasks.json"
