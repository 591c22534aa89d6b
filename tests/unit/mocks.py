"""Test doubles and builders for task store tests."""

from collections.abc import Sequence
from datetime import date

from src.core.storage import InMemoryTaskRepository, StorageError
from src.domain.task import TaskRecord, TaskStatus


def make_task(
    task_id: str,
    *,
    title: str = "Task",
    description: str = "Details",
    due_date: date | None = None,
    completion_date: date | None = None,
    location: str = "",
    status: TaskStatus = TaskStatus.NEW,
) -> TaskRecord:
    """Build a valid task record for tests."""
    return TaskRecord(
        id=task_id,
        title=title,
        description=description,
        due_date=due_date,
        completion_date=completion_date,
        location=location,
        status=status,
    )


class RecordingRepository(InMemoryTaskRepository):
    """In-memory repository that keeps every snapshot passed to save.

    The ``fail_on_load`` / ``fail_on_save`` switches simulate storage outages;
    a failed save is still recorded.
    """

    def __init__(self, payload: str | None = None):
        super().__init__(payload)
        self.saved: list[tuple[TaskRecord, ...]] = []
        self.fail_on_load = False
        self.fail_on_save = False

    @property
    def save_count(self) -> int:
        return len(self.saved)

    def load(self) -> list[TaskRecord]:
        if self.fail_on_load:
            raise StorageError("Simulated load failure")
        return super().load()

    def save(self, tasks: Sequence[TaskRecord]) -> None:
        self.saved.append(tuple(tasks))
        if self.fail_on_save:
            raise StorageError("Simulated save failure")
        super().save(tasks)


class SequentialIds:
    """Deterministic ID factory: task-1, task-2, ..."""

    def __init__(self, prefix: str = "task"):
        self.prefix = prefix
        self.count = 0

    def __call__(self) -> str:
        self.count += 1
        return f"{self.prefix}-{self.count}"
