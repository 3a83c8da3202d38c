import datetime as dt
from typing import Optional

from pydantic import field_validator

from event_planner.schemas.base import CamelModel, clean_text, coerce_id


def _validate_update_text(v):
    if v is not None and not isinstance(v, str):
        raise ValueError("Update text must be a string")
    return clean_text(v, "Update text", 1, 500)


class TaskUpdateCreate(CamelModel):
    task_id: int
    update_text: str

    @field_validator("task_id", mode="before")
    @classmethod
    def validate_task_id(cls, v):
        return coerce_id(v, "Task ID")

    @field_validator("update_text", mode="before")
    @classmethod
    def validate_update_text(cls, v):
        return _validate_update_text(v)


class TaskUpdatePatch(CamelModel):
    update_text: Optional[str] = None

    @field_validator("update_text", mode="before")
    @classmethod
    def validate_update_text(cls, v):
        return _validate_update_text(v)


class TaskUpdateOut(CamelModel):
    id: int
    task_id: int
    update_text: str
    created_by: int
    updated_at: dt.datetime
