"""Pydantic models for raw task input gathered by the UI."""

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class TaskCreate(BaseModel):
    """Pydantic model for new-task input before validation rules are applied.

    Only type coercion happens here; blank text and date ordering are checked
    by the validator so failures can be reported in a fixed order.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    title: str = Field(default="", description="Task title as typed")
    description: str = Field(default="", description="Task description as typed")
    due_date: date | None = Field(default=None, description="Selected due date")
    completion_date: date | None = Field(default=None, description="Selected completion date")
    location: str = Field(default="", description="Location as typed")

    @field_validator("title", "description", "location", mode="before")
    @classmethod
    def coerce_missing_text(cls, v: Any) -> Any:
        """Treat None as empty text."""
        return "" if v is None else v

    @field_validator("due_date", "completion_date", mode="before")
    @classmethod
    def coerce_unset_date(cls, v: Any) -> Any:
        """Treat empty strings as unset and keep only the date part of date-times.

        Date pickers hand over a full timestamp ("2024-01-10T15:30:00.000Z");
        the calendar date as written is kept, with no timezone conversion.
        """
        if isinstance(v, datetime):
            return v.date()
        if isinstance(v, str):
            text = v.strip()
            if not text:
                return None
            if "T" in text or " " in text:
                try:
                    return datetime.fromisoformat(text).date()
                except ValueError:
                    return v
        return v
