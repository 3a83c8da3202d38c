# event_planner/schemas/task.py
import datetime as dt
from typing import Optional

from pydantic import Field, field_validator

from event_planner.models.task import DEFAULT_TASK_STATUS
from event_planner.schemas.base import CamelModel, clean_text, clean_description, coerce_date, coerce_id, ensure_not_past


class TaskCreate(CamelModel):
    event_id: int
    name: str
    description: Optional[str] = None
    due_date: dt.date
    status: str = Field(default=DEFAULT_TASK_STATUS)

    @field_validator("event_id", mode="before")
    @classmethod
    def validate_event_id(cls, v):
        return coerce_id(v, "Event ID")

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, v):
        if v is not None and not isinstance(v, str):
            raise ValueError("Task name must be a string")
        return clean_text(v, "Task name", 2, 100)

    @field_validator("description")
    @classmethod
    def validate_description(cls, v):
        return clean_description(v)

    @field_validator("due_date", mode="before")
    @classmethod
    def parse_due_date(cls, v):
        return coerce_date(v)

    @field_validator("due_date")
    @classmethod
    def due_date_not_in_past(cls, v):
        return ensure_not_past(v, "Due date")

    @field_validator("status")
    @classmethod
    def status_not_blank(cls, v):
        v = v.strip()
        return v or DEFAULT_TASK_STATUS


class TaskPatch(CamelModel):
    """Partial update of a task; the parent event cannot be changed."""

    name: Optional[str] = None
    description: Optional[str] = None
    due_date: Optional[dt.date] = None
    status: Optional[str] = None

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, v):
        if v is not None and not isinstance(v, str):
            raise ValueError("Task name must be a string")
        return clean_text(v, "Task name", 2, 100)

    @field_validator("description")
    @classmethod
    def validate_description(cls, v):
        return clean_description(v)

    @field_validator("due_date", mode="before")
    @classmethod
    def parse_due_date(cls, v):
        return coerce_date(v)

    @field_validator("due_date")
    @classmethod
    def due_date_not_in_past(cls, v):
        return ensure_not_past(v, "Due date")

    @field_validator("status", mode="before")
    @classmethod
    def status_is_string(cls, v):
        if not isinstance(v, str):
            raise ValueError("Status must be a string")
        return v.strip() or DEFAULT_TASK_STATUS


class TaskOut(CamelModel):
    id: int
    event_id: int
    name: str
    description: Optional[str] = None
    status: str
    due_date: Optional[dt.date] = None
    created_by: int
    created_at: dt.datetime
