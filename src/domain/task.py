"""Task domain models and enums."""

from datetime import date
from enum import StrEnum
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


class TaskStatus(StrEnum):
    """Task lifecycle status. Values are the labels shown to users."""

    NEW = "New"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


class SortMode(StrEnum):
    """Ordering applied to a read of the task collection."""

    NONE = "none"
    BY_DUE_DATE = "date"
    BY_STATUS = "status"

    @classmethod
    def parse(cls, value: "str | SortMode | None") -> "SortMode":
        """Parse a sort selection by value ("date"), member name ("BY_DUE_DATE") or empty for none."""
        if value is None or isinstance(value, SortMode):
            return value or cls.NONE
        text = value.strip()
        if not text:
            return cls.NONE
        for member in cls:
            if text.lower() == member.value or text.upper() == member.name:
                return member
        msg = f"Unknown sort mode: {value!r}"
        raise ValueError(msg)


class TaskRecord(BaseModel):
    """A single to-do item.

    Records are frozen; changes produce a new record via ``model_copy``.
    Serialized keys are camelCase (``dueDate``, ``completionDate``) to match
    the stored payload format.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: str = Field(..., min_length=1, description="Opaque unique task ID")
    title: str = Field(..., description="Task title")
    description: str = Field(..., description="Detailed task description")
    due_date: date | None = Field(default=None, description="Date the task is due")
    completion_date: date | None = Field(default=None, description="Date the task was or will be completed")
    location: str = Field(default="", description="Free-text location")
    status: TaskStatus = Field(default=TaskStatus.NEW, description="Current lifecycle status")

    @field_validator("title", "description")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Reject empty or whitespace-only text."""
        if not v.strip():
            msg = "must not be blank"
            raise ValueError(msg)
        return v

    @model_validator(mode="after")
    def validate_date_order(self) -> Self:
        """Completion date may not precede the due date."""
        if self.due_date and self.completion_date and self.completion_date < self.due_date:
            msg = f"completion date {self.completion_date} is earlier than due date {self.due_date}"
            raise ValueError(msg)
        return self

    def to_payload(self) -> dict:
        """Serialize to the stored JSON-compatible form."""
        return self.model_dump(mode="json", by_alias=True)
