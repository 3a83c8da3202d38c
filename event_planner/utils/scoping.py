# event_planner/utils/scoping.py
from dataclasses import dataclass
from typing import Any, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Query, Session

from event_planner.models import Event, Task, TaskUpdate
from event_planner.schemas.user import Requester
from event_planner.utils.ownership import ResourceKind


@dataclass(frozen=True)
class QueryFilter:
    """Declarative restriction for a list query.

    ``clause`` is a SQL expression over the resource's table (ancestor
    checks are correlated EXISTS subqueries), or None when the requester
    may see every row.
    """

    kind: ResourceKind
    clause: Optional[Any] = None

    @property
    def unrestricted(self) -> bool:
        return self.clause is None

    def apply(self, query: Query) -> Query:
        if self.clause is None:
            return query
        return query.filter(self.clause)


def _event_owned_by(user_id: int):
    return Event.owner_id == user_id


def _task_visible_to(user_id: int):
    return or_(
        Task.created_by == user_id,
        Task.event.has(_event_owned_by(user_id)),
    )


def _task_update_visible_to(user_id: int):
    return or_(
        TaskUpdate.created_by == user_id,
        TaskUpdate.task.has(_task_visible_to(user_id)),
    )


def scoped_list(requester: Requester, kind: ResourceKind) -> QueryFilter:
    """Build the filter restricting ``kind`` to rows ``requester`` may see"""
    if requester.is_admin:
        return QueryFilter(kind)

    if kind is ResourceKind.EVENT:
        return QueryFilter(kind, _event_owned_by(requester.id))
    if kind is ResourceKind.TASK:
        return QueryFilter(kind, _task_visible_to(requester.id))
    if kind is ResourceKind.TASK_UPDATE:
        return QueryFilter(kind, _task_update_visible_to(requester.id))
    raise ValueError(f"Unsupported resource kind: {kind}")


def scoped_query(db: Session, requester: Requester, kind: ResourceKind) -> Query:
    """Query over ``kind`` already restricted to the requester's rows"""
    model = kind.model
    query = db.query(model)
    return scoped_list(requester, kind).apply(query).order_by(model.id)
