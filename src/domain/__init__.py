"""Domain models and DTOs."""

from src.domain.create_models import TaskCreate
from src.domain.task import SortMode, TaskRecord, TaskStatus


__all__ = [
    "SortMode",
    "TaskCreate",
    "TaskRecord",
    "TaskStatus",
]
