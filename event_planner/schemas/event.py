# event_planner/schemas/event.py
import datetime as dt
from typing import Optional

from pydantic import field_validator

from event_planner.schemas.base import CamelModel, clean_text, clean_description, coerce_date, ensure_not_past


class EventCreate(CamelModel):
    name: str
    description: Optional[str] = None
    date: dt.date

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, v):
        if v is not None and not isinstance(v, str):
            raise ValueError("Event name must be a string")
        return clean_text(v, "Event name", 2, 100)

    @field_validator("description")
    @classmethod
    def validate_description(cls, v):
        return clean_description(v)

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, v):
        return coerce_date(v)

    @field_validator("date")
    @classmethod
    def date_not_in_past(cls, v):
        return ensure_not_past(v, "Event date")


class EventPatch(CamelModel):
    """Partial update; only fields present in the request are applied."""

    name: Optional[str] = None
    description: Optional[str] = None
    date: Optional[dt.date] = None

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, v):
        if v is not None and not isinstance(v, str):
            raise ValueError("Event name must be a string")
        return clean_text(v, "Event name", 2, 100)

    @field_validator("description")
    @classmethod
    def validate_description(cls, v):
        return clean_description(v)

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, v):
        return coerce_date(v)

    @field_validator("date")
    @classmethod
    def date_not_in_past(cls, v):
        return ensure_not_past(v, "Event date")


class EventOut(CamelModel):
    id: int
    name: str
    description: Optional[str] = None
    date: dt.date
    owner_id: int
    created_at: dt.datetime
