"""Ordering and filtering of task collections.

All functions return new lists and leave their input untouched. Python's
sort is stable, so records that compare equal keep their store order.
"""

from collections.abc import Collection, Iterable
from datetime import date

from src.core.config import settings
from src.domain.task import SortMode, TaskRecord, TaskStatus


def _due_date_key(*, undated_first: bool):
    def key(task: TaskRecord) -> tuple[int, date]:
        if task.due_date is None:
            return (0 if undated_first else 1, date.min)
        return (1 if undated_first else 0, task.due_date)

    return key


def _status_key(task: TaskRecord) -> str:
    return task.status.value


def order_tasks(
    tasks: Iterable[TaskRecord],
    mode: SortMode | str | None = SortMode.NONE,
    *,
    undated_first: bool | None = None,
) -> list[TaskRecord]:
    """Return ``tasks`` ordered by ``mode``.

    BY_DUE_DATE sorts ascending with undated tasks first unless
    ``undated_first`` (default: settings.undated_tasks_first) is False.
    BY_STATUS sorts by status label (Cancelled < Completed < In Progress < New).
    """
    mode = SortMode.parse(mode)
    items = list(tasks)

    if mode == SortMode.BY_DUE_DATE:
        if undated_first is None:
            undated_first = settings.undated_tasks_first
        return sorted(items, key=_due_date_key(undated_first=undated_first))
    if mode == SortMode.BY_STATUS:
        return sorted(items, key=_status_key)
    return items


def filter_tasks(
    tasks: Iterable[TaskRecord],
    *,
    statuses: Collection[TaskStatus] | None = None,
    query: str | None = None,
) -> list[TaskRecord]:
    """Keep tasks matching every given criterion, preserving order.

    Args:
        tasks: Tasks to filter
        statuses: Keep only tasks in one of these statuses
        query: Case-insensitive substring of title, description or location
    """
    wanted = {TaskStatus(s) for s in statuses} if statuses is not None else None
    needle = query.strip().casefold() if query else ""

    result = []
    for task in tasks:
        if wanted is not None and task.status not in wanted:
            continue
        if needle and not any(needle in text.casefold() for text in (task.title, task.description, task.location)):
            continue
        result.append(task)
    return result
