"""Validation of new-task input.

Rules are checked in a fixed order and the first violation is reported:
blank title, blank description, missing dates (when required), then date order.
"""

import logging
import uuid
from collections.abc import Callable, Mapping
from typing import Any

from pydantic import ValidationError

from src.core.config import settings
from src.core.errors import InvalidDateOrder, InvalidField, MissingField, TaskValidationError
from src.domain.create_models import TaskCreate
from src.domain.task import TaskRecord, TaskStatus
from src.models.service_models import ValidationResult


logger = logging.getLogger(__name__)


def new_task_id() -> str:
    """Generate an opaque, never-reused task ID."""
    return uuid.uuid4().hex


def _coerce_input(raw: TaskCreate | Mapping[str, Any]) -> TaskCreate | InvalidField:
    if isinstance(raw, TaskCreate):
        return raw
    try:
        return TaskCreate.model_validate(dict(raw))
    except ValidationError as e:
        first = e.errors()[0]
        field = str(first["loc"][0]) if first["loc"] else "input"
        return InvalidField(field=_snake_case_field(field), reason=first["msg"])


def _snake_case_field(name: str) -> str:
    for field_name, info in TaskCreate.model_fields.items():
        if name in (field_name, info.alias):
            return field_name
    return name


def check_rules(data: TaskCreate, *, require_dates: bool) -> TaskValidationError | None:
    """Return the first rule violation in ``data``, or None when it is valid."""
    if not data.title.strip():
        return MissingField(field="title")
    if not data.description.strip():
        return MissingField(field="description")

    if require_dates:
        if data.due_date is None:
            return MissingField(field="due_date")
        if data.completion_date is None:
            return MissingField(field="completion_date")

    if data.due_date and data.completion_date and data.completion_date < data.due_date:
        return InvalidDateOrder(due_date=data.due_date, completion_date=data.completion_date)

    return None


def validate_new_task(
    raw: TaskCreate | Mapping[str, Any],
    *,
    require_dates: bool | None = None,
    id_factory: Callable[[], str] = new_task_id,
) -> ValidationResult:
    """Validate new-task input and build the task record.

    Args:
        raw: TaskCreate model or mapping of raw field values (snake_case or camelCase keys)
        require_dates: Require both dates; defaults to settings.require_dates_on_create
        id_factory: Callable producing the new task ID

    Returns:
        ValidationResult holding either the new record (status New) or the first error
    """
    if require_dates is None:
        require_dates = settings.require_dates_on_create

    data = _coerce_input(raw)
    if isinstance(data, InvalidField):
        logger.debug("Rejected task input: %s", data)
        return ValidationResult(error=data)

    error = check_rules(data, require_dates=require_dates)
    if error is not None:
        logger.debug("Rejected task input: %s", error)
        return ValidationResult(error=error)

    task = TaskRecord(
        id=id_factory(),
        title=data.title.strip(),
        description=data.description.strip(),
        due_date=data.due_date,
        completion_date=data.completion_date,
        location=data.location.strip(),
        status=TaskStatus.NEW,
    )
    return ValidationResult(task=task)
