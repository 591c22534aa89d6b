"""Pure status transition functions for the task lifecycle."""

import logging

from src.core.config import settings
from src.domain.task import TaskRecord, TaskStatus


logger = logging.getLogger(__name__)


_WORKING_STATES = {TaskStatus.IN_PROGRESS, TaskStatus.COMPLETED, TaskStatus.CANCELLED}

# Any state may move to any working state; nothing returns to New
LOOSE_TRANSITIONS: dict[TaskStatus, set[TaskStatus]] = {
    TaskStatus.NEW: set(_WORKING_STATES),
    TaskStatus.IN_PROGRESS: set(_WORKING_STATES),
    TaskStatus.COMPLETED: set(_WORKING_STATES),
    TaskStatus.CANCELLED: set(_WORKING_STATES),
}

# Completed and Cancelled are terminal
STRICT_TRANSITIONS: dict[TaskStatus, set[TaskStatus]] = {
    TaskStatus.NEW: set(_WORKING_STATES),
    TaskStatus.IN_PROGRESS: set(_WORKING_STATES),
    TaskStatus.COMPLETED: set(),
    TaskStatus.CANCELLED: set(),
}


def get_transitions(*, strict: bool | None = None) -> dict[TaskStatus, set[TaskStatus]]:
    """Get allowed status transitions; defaults to settings.strict_status_transitions."""
    if strict is None:
        strict = settings.strict_status_transitions
    return STRICT_TRANSITIONS if strict else LOOSE_TRANSITIONS


def can_transition(current: TaskStatus, new_status: TaskStatus, *, strict: bool | None = None) -> bool:
    """Return True if ``current`` may move to ``new_status``.

    Re-applying the current status is always allowed.
    """
    if current == new_status:
        return True
    return new_status in get_transitions(strict=strict)[current]


def available_transitions(current: TaskStatus, *, strict: bool | None = None) -> list[TaskStatus]:
    """List the statuses a task in ``current`` may move to, in enumeration order."""
    allowed = get_transitions(strict=strict)[current]
    return [status for status in TaskStatus if status in allowed and status != current]


def apply_status(task: TaskRecord, new_status: TaskStatus, *, strict: bool | None = None) -> TaskRecord:
    """Return a copy of ``task`` with ``status`` replaced.

    Moving back to New is rejected in both modes; strict mode also rejects
    any move out of Completed or Cancelled.

    Raises:
        ValueError: If the transition is not in the active table
    """
    new_status = TaskStatus(new_status)
    if task.status == new_status:
        return task

    if not can_transition(task.status, new_status, strict=strict):
        msg = f"Cannot change status: task {task.id} is {task.status}, cannot move to {new_status}"
        raise ValueError(msg)

    logger.debug("Transitioned task %s from %s to %s", task.id, task.status, new_status)
    return task.model_copy(update={"status": new_status})
