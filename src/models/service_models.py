"""Pydantic models for service layer return types.

Core operations report failures as values; these models carry either the
successful outcome or the error, never raise.
"""

from pydantic import BaseModel, ConfigDict

from src.core.errors import InvalidStatusTransition, LoadFailure, PersistFailure, TaskValidationError
from src.domain.task import TaskRecord


class ValidationResult(BaseModel):
    """Outcome of validating new-task input."""

    model_config = ConfigDict(frozen=True)

    task: TaskRecord | None = None
    error: TaskValidationError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class StoreResult(BaseModel):
    """Outcome of a task store mutation.

    ``snapshot`` is the collection after the operation. ``error`` is set when
    the save failed (the change is still applied) or when a status change was
    rejected (nothing changed).
    """

    model_config = ConfigDict(frozen=True)

    snapshot: tuple[TaskRecord, ...]
    error: PersistFailure | InvalidStatusTransition | None = None
    saved: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None


class LoadResult(BaseModel):
    """Outcome of loading the collection from storage."""

    model_config = ConfigDict(frozen=True)

    snapshot: tuple[TaskRecord, ...]
    error: LoadFailure | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
