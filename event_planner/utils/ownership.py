# event_planner/utils/ownership.py
"""
Ownership rules for the Event -> Task -> TaskUpdate hierarchy.

A resource's *effective owner chain* is the set of user ids entitled to act
on it:

* Event      -> {event owner}
* Task       -> {task creator, event owner}
* TaskUpdate -> {update creator, task creator, event owner}

Admins bypass the chain entirely. ``OwnershipResolver`` answers the
question for a single resource id; ``scoped_list`` in
``event_planner.utils.scoping`` expresses the same rule as a SQL filter.
"""

import enum
import logging
from dataclasses import dataclass
from typing import Any, FrozenSet

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from event_planner.errors import ForbiddenError, NotFoundError, StoreError
from event_planner.models import Event, Task, TaskUpdate
from event_planner.schemas.user import Requester

logger = logging.getLogger(__name__)


class ResourceKind(str, enum.Enum):
    EVENT = "event"
    TASK = "task"
    TASK_UPDATE = "task_update"

    @property
    def label(self) -> str:
        return {
            ResourceKind.EVENT: "Event",
            ResourceKind.TASK: "Task",
            ResourceKind.TASK_UPDATE: "Task update",
        }[self]

    @property
    def model(self):
        return {
            ResourceKind.EVENT: Event,
            ResourceKind.TASK: Task,
            ResourceKind.TASK_UPDATE: TaskUpdate,
        }[self]


ALLOWED_ADMIN = "admin"
ALLOWED_OWNER = "owner"
DENIED_FORBIDDEN = "forbidden"


@dataclass(frozen=True)
class AccessDecision:
    allowed: bool
    reason: str
    resource: Any = None


def owner_chain(resource: Any) -> FrozenSet[int]:
    """Return the user ids in the effective owner chain of ``resource``."""
    if isinstance(resource, Event):
        return frozenset({resource.owner_id})
    if isinstance(resource, Task):
        return frozenset({resource.created_by, resource.event.owner_id})
    if isinstance(resource, TaskUpdate):
        task = resource.task
        return frozenset({resource.created_by, task.created_by, task.event.owner_id})
    raise TypeError(f"Unsupported resource type: {type(resource).__name__}")


class OwnershipResolver:
    """Decides whether a requester may act on a single resource"""

    def __init__(self, db: Session):
        self.db = db

    def _load_options(self, kind: ResourceKind):
        # Ancestors are joined in so the whole chain comes back in one read
        if kind is ResourceKind.TASK:
            return [joinedload(Task.event)]
        if kind is ResourceKind.TASK_UPDATE:
            return [joinedload(TaskUpdate.task).joinedload(Task.event)]
        return []

    def load(self, kind: ResourceKind, resource_id: int) -> Any:
        """Fetch the resource with its ancestors or raise ``NotFoundError``."""
        model = kind.model
        try:
            resource = (
                self.db.query(model)
                .options(*self._load_options(kind))
                .filter(model.id == resource_id)
                .first()
            )
        except SQLAlchemyError as exc:
            logger.exception(f"Failed to load {kind.value} {resource_id}")
            raise StoreError(f"Failed to retrieve {kind.label.lower()}") from exc

        if resource is None:
            raise NotFoundError(f"{kind.label} not found")
        return resource

    def decide(self, requester: Requester, resource: Any) -> AccessDecision:
        if requester.is_admin:
            return AccessDecision(True, ALLOWED_ADMIN, resource)
        if requester.id in owner_chain(resource):
            return AccessDecision(True, ALLOWED_OWNER, resource)
        return AccessDecision(False, DENIED_FORBIDDEN, resource)

    def can_access(self, requester: Requester, kind: ResourceKind, resource_id: int) -> AccessDecision:
        """Check access to ``kind``/``resource_id``.

        Raises ``NotFoundError`` when the resource does not exist; ownership
        is only evaluated for existing rows, whatever the requester's role.
        """
        resource = self.load(kind, resource_id)
        return self.decide(requester, resource)

    def require_access(self, requester: Requester, kind: ResourceKind, resource_id: int) -> Any:
        """Return the resource if ``requester`` may act on it, else raise."""
        decision = self.can_access(requester, kind, resource_id)
        if not decision.allowed:
            logger.warning(
                f"User {requester.id} denied access to {kind.value} {resource_id}"
            )
            raise ForbiddenError(f"You are not authorized to access this {kind.label.lower()}")
        return decision.resource
