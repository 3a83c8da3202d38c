# event_planner/schemas/base.py
from datetime import date, datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Resource payloads use camelCase on the wire (eventId, dueDate, ...)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def clean_text(value: Optional[str], label: str, min_length: int, max_length: int, required: bool = True) -> Optional[str]:
    """Trim ``value`` and enforce its length bounds."""
    if value is None:
        if required:
            raise ValueError(f"{label} is required")
        return None
    value = value.strip()
    if not value:
        if required:
            raise ValueError(f"{label} is required")
        return value
    if len(value) < min_length or len(value) > max_length:
        if min_length <= 1:
            raise ValueError(f"{label} must be between 1 and {max_length} characters")
        raise ValueError(f"{label} must be between {min_length} and {max_length} characters")
    return value


def clean_description(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    if len(value) > 500:
        raise ValueError("Description cannot exceed 500 characters")
    return value


def coerce_date(value: Any) -> Any:
    """Normalise date input to something pydantic reads as a calendar date.

    Only ISO 8601 strings and date objects are accepted; numbers would
    otherwise be read as Unix timestamps.
    """
    if value is None:
        return value
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError("Invalid date format. Use YYYY-MM-DD")
    # Full ISO 8601 timestamps are truncated to their date
    if len(value) > 10:
        try:
            return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
        except ValueError:
            return value
    return value


def coerce_id(value: Any, label: str) -> Any:
    # JSON true/false would otherwise pass as 1/0
    if isinstance(value, bool):
        raise ValueError(f"{label} must be an integer")
    return value


def ensure_not_past(value: Optional[date], label: str) -> Optional[date]:
    if value is None:
        raise ValueError(f"{label} is required")
    if value < date.today():
        raise ValueError(f"{label} cannot be in the past")
    return value
