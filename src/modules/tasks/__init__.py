"""Task lifecycle: validation, status transitions, ordering and the task store."""

from src.modules.tasks.sorting import filter_tasks, order_tasks
from src.modules.tasks.state_machine import apply_status, available_transitions, can_transition
from src.modules.tasks.store import TaskStore
from src.modules.tasks.validator import validate_new_task


__all__ = [
    "TaskStore",
    "apply_status",
    "available_transitions",
    "can_transition",
    "filter_tasks",
    "order_tasks",
    "validate_new_task",
]
