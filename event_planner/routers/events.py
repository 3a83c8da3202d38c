# event_planner/routers/events.py
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from event_planner.database import get_db
from event_planner.schemas.event import EventCreate, EventPatch, EventOut
from event_planner.schemas.task import TaskOut
from event_planner.schemas.user import Requester
from event_planner.services.event_service import EventService
from event_planner.utils.auth import get_current_user

router = APIRouter()


@router.post("", response_model=EventOut, status_code=status.HTTP_201_CREATED)
def create_event(
    event: EventCreate,
    db: Session = Depends(get_db),
    current_user: Requester = Depends(get_current_user),
):
    """Create an event owned by the current user"""
    return EventService(db).create(current_user, event)


@router.get("", response_model=List[EventOut])
def get_events(db: Session = Depends(get_db), current_user: Requester = Depends(get_current_user)):
    """List events: admins see all, users see the events they own"""
    return EventService(db).list(current_user)


@router.get("/{event_id}", response_model=EventOut)
def get_event(event_id: int, db: Session = Depends(get_db), current_user: Requester = Depends(get_current_user)):
    return EventService(db).get(current_user, event_id)


@router.put("/{event_id}", response_model=EventOut)
def update_event(
    event_id: int,
    event_update: EventPatch,
    db: Session = Depends(get_db),
    current_user: Requester = Depends(get_current_user),
):
    """Update the provided fields of an event"""
    return EventService(db).update(current_user, event_id, event_update)


@router.delete("/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_event(event_id: int, db: Session = Depends(get_db), current_user: Requester = Depends(get_current_user)):
    """Delete an event together with its tasks and their updates"""
    EventService(db).delete(current_user, event_id)
    return None


@router.get("/{event_id}/tasks", response_model=List[TaskOut])
def get_event_tasks(event_id: int, db: Session = Depends(get_db), current_user: Requester = Depends(get_current_user)):
    return EventService(db).list_tasks(current_user, event_id)
