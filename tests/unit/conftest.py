"""Pytest configuration and fixtures for unit tests."""

import pytest

from src.modules.tasks.store import TaskStore
from tests.unit.mocks import RecordingRepository, SequentialIds, make_task


@pytest.fixture
def ids() -> SequentialIds:
    """Provides a fresh deterministic ID factory."""
    return SequentialIds()


@pytest.fixture
def repository() -> RecordingRepository:
    """Provides a fresh recording in-memory repository."""
    return RecordingRepository()


@pytest.fixture
def store(repository, test_settings) -> TaskStore:
    """Provides an empty task store backed by the recording repository."""
    return TaskStore(repository, settings=test_settings)


@pytest.fixture
def three_task_store(repository, test_settings) -> TaskStore:
    """Task store preloaded with three records (c, b, a in store order)."""
    repository.payload = RecordingRepository.from_tasks(
        [make_task("c", title="C"), make_task("b", title="B"), make_task("a", title="A")]
    ).payload
    store = TaskStore(repository, settings=test_settings)
    assert store.load().ok
    return store
