# event_planner/services/event_service.py
from typing import Any, List

from event_planner.models import Event, Task
from event_planner.schemas.event import EventCreate, EventPatch
from event_planner.schemas.user import Requester
from event_planner.services.base import BaseService, parse_input
from event_planner.utils.ownership import ResourceKind
from event_planner.utils.scoping import scoped_query


class EventService(BaseService):
    """Events are visible to their owner and to admins."""

    def create(self, requester: Requester, data: Any) -> Event:
        payload = parse_input(EventCreate, data)
        event = Event(
            name=payload.name,
            description=payload.description,
            date=payload.date,
            owner_id=requester.id,
        )
        self.db.add(event)
        self._commit(missing_parent="User")
        self.db.refresh(event)
        self.logger.info(f"User {requester.id} created event {event.id}")
        return event

    def list(self, requester: Requester) -> List[Event]:
        return self._fetch_all(scoped_query(self.db, requester, ResourceKind.EVENT), "events")

    def get(self, requester: Requester, event_id: int) -> Event:
        return self.resolver.require_access(requester, ResourceKind.EVENT, event_id)

    def update(self, requester: Requester, event_id: int, data: Any) -> Event:
        payload = parse_input(EventPatch, data)
        event = self.resolver.require_access(requester, ResourceKind.EVENT, event_id)

        for field, value in payload.model_dump(exclude_unset=True).items():
            setattr(event, field, value)

        self._commit()
        self.db.refresh(event)
        return event

    def delete(self, requester: Requester, event_id: int) -> None:
        event = self.resolver.require_access(requester, ResourceKind.EVENT, event_id)
        # Tasks and their updates go with the event
        self.db.delete(event)
        self._commit()
        self.logger.info(f"User {requester.id} deleted event {event_id}")

    def list_tasks(self, requester: Requester, event_id: int) -> List[Task]:
        self.resolver.require_access(requester, ResourceKind.EVENT, event_id)
        query = self.db.query(Task).filter(Task.event_id == event_id).order_by(Task.id)
        return self._fetch_all(query, "tasks")
