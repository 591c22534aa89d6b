"""Error values reported by the task core and their user-facing descriptions.

Core operations never raise these; they are returned inside result models so
the UI can decide how to surface them.
"""

from datetime import date
from enum import Enum
from typing import ClassVar

from pydantic import BaseModel, ConfigDict

from src.domain.task import TaskStatus


class ErrorSeverity(Enum):
    """Severity levels for errors."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCode:
    """Error codes for specific error conditions."""

    # Input errors
    ERR_MISSING_FIELD = "ERR_MISSING_FIELD"
    ERR_INVALID_FIELD = "ERR_INVALID_FIELD"
    ERR_INVALID_DATE_ORDER = "ERR_INVALID_DATE_ORDER"

    # Lifecycle errors
    ERR_INVALID_STATUS_TRANSITION = "ERR_INVALID_STATUS_TRANSITION"

    # Storage errors
    ERR_LOAD_FAILURE = "ERR_LOAD_FAILURE"
    ERR_PERSIST_FAILURE = "ERR_PERSIST_FAILURE"


class TaskError(BaseModel):
    """Base class for error values."""

    model_config = ConfigDict(frozen=True)

    code: ClassVar[str]


class MissingField(TaskError):
    """A required input is absent or blank."""

    code: ClassVar[str] = ErrorCode.ERR_MISSING_FIELD

    field: str


class InvalidField(TaskError):
    """An input could not be coerced to its type (e.g. an unparseable date)."""

    code: ClassVar[str] = ErrorCode.ERR_INVALID_FIELD

    field: str
    reason: str


class InvalidDateOrder(TaskError):
    """Completion date precedes due date."""

    code: ClassVar[str] = ErrorCode.ERR_INVALID_DATE_ORDER

    due_date: date
    completion_date: date


class InvalidStatusTransition(TaskError):
    """A status change rejected by the active transition table."""

    code: ClassVar[str] = ErrorCode.ERR_INVALID_STATUS_TRANSITION

    task_id: str
    current: TaskStatus
    requested: TaskStatus


class LoadFailure(TaskError):
    """Persisted data could not be read or parsed."""

    code: ClassVar[str] = ErrorCode.ERR_LOAD_FAILURE

    reason: str


class PersistFailure(TaskError):
    """A save call failed; the in-memory change was kept."""

    code: ClassVar[str] = ErrorCode.ERR_PERSIST_FAILURE

    reason: str


TaskValidationError = MissingField | InvalidField | InvalidDateOrder


class ErrorResponse(BaseModel):
    """Structured error response with user-friendly messaging."""

    code: str
    message: str
    suggestion: str
    severity: ErrorSeverity


_FIELD_LABELS: dict[str, str] = {
    "title": "Title",
    "description": "Description",
    "due_date": "Due date",
    "completion_date": "Completion date",
    "location": "Location",
}


def _field_label(field: str) -> str:
    return _FIELD_LABELS.get(field, field.replace("_", " ").capitalize())


def describe_error(error: TaskError) -> ErrorResponse:  # noqa: PLR0911
    """Map an error value to a message and recovery suggestion for display.

    Args:
        error: Any error value returned by the validator or the task store

    Returns:
        ErrorResponse with code, message, suggestion, and severity
    """
    match error:
        case MissingField(field=field):
            return ErrorResponse(
                code=error.code,
                message=f"{_field_label(field)} is required!",
                suggestion="Title and Description are required. Fill in the missing field and try again.",
                severity=ErrorSeverity.LOW,
            )
        case InvalidField(field=field, reason=reason):
            return ErrorResponse(
                code=error.code,
                message=f"{_field_label(field)} is not valid: {reason}",
                suggestion="Dates must be in YYYY-MM-DD format.",
                severity=ErrorSeverity.LOW,
            )
        case InvalidDateOrder():
            return ErrorResponse(
                code=error.code,
                message="Completion date cannot be earlier than due date!",
                suggestion=f"Pick a completion date on or after {error.due_date.isoformat()}.",
                severity=ErrorSeverity.LOW,
            )
        case InvalidStatusTransition(current=current, requested=requested):
            return ErrorResponse(
                code=error.code,
                message=f"Cannot change status from {current} to {requested}.",
                suggestion="Completed and cancelled tasks can no longer change status.",
                severity=ErrorSeverity.LOW,
            )
        case LoadFailure():
            return ErrorResponse(
                code=error.code,
                message="Failed to load tasks!",
                suggestion="Your saved tasks could not be read. New tasks will still be kept for this session.",
                severity=ErrorSeverity.HIGH,
            )
        case PersistFailure():
            return ErrorResponse(
                code=error.code,
                message="Failed to save tasks!",
                suggestion="Your changes are kept for now. Try again before closing the app.",
                severity=ErrorSeverity.MEDIUM,
            )
    return ErrorResponse(
        code=error.code,
        message="An unexpected error occurred.",
        suggestion="Please try again.",
        severity=ErrorSeverity.MEDIUM,
    )
