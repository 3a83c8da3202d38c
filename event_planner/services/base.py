# event_planner/services/base.py
"""
Shared plumbing for the resource services.

Every service works on one request-scoped SQLAlchemy session. Ownership
checks and the writes that follow them run in that session's transaction
and are committed together by ``_commit``; any store failure rolls the
session back and is re-raised as one of the errors in
``event_planner.errors``.
"""

import logging
from typing import Any, Optional, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from event_planner.errors import (
    BadRequestError,
    NotFoundError,
    StoreError,
    ValidationError,
    format_validation_errors,
)
from event_planner.utils.ownership import OwnershipResolver

T = TypeVar("T", bound=BaseModel)


def parse_input(schema: Type[T], data: Any) -> T:
    """Coerce ``data`` into the operation's input DTO.

    Accepts an instance of ``schema`` as-is; anything else (usually a dict)
    is validated, and failures become a ``ValidationError`` before the store
    is touched.
    """
    if isinstance(data, schema):
        return data
    try:
        return schema.model_validate(data)
    except PydanticValidationError as exc:
        errors = [dict(err, loc=("body",) + tuple(err.get("loc", ()))) for err in exc.errors()]
        raise ValidationError(format_validation_errors(errors)) from exc


class BaseService:
    def __init__(self, db: Session):
        self.db = db
        self.resolver = OwnershipResolver(db)
        self.logger = logging.getLogger(self.__class__.__module__)

    def _commit(self, missing_parent: Optional[str] = None) -> None:
        """Commit the current transaction, mapping store errors.

        ``missing_parent`` names the parent row whose disappearance would
        surface here as a foreign key violation (e.g. "Event").
        """
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            message = str(exc.orig).upper()
            if missing_parent and "FOREIGN KEY" in message:
                raise NotFoundError(f"{missing_parent} not found") from exc
            self.logger.warning(f"Constraint violation: {exc.orig}")
            raise BadRequestError("Request violates a data constraint") from exc
        except SQLAlchemyError as exc:
            self.db.rollback()
            self.logger.exception("Store write failed")
            raise StoreError("Failed to save changes") from exc

    def _fetch_all(self, query, what: str):
        try:
            return query.all()
        except SQLAlchemyError as exc:
            self.logger.exception(f"Failed to list {what}")
            raise StoreError(f"Failed to retrieve {what}") from exc
