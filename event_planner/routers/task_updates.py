from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from event_planner.database import get_db
from event_planner.schemas.task_update import TaskUpdateCreate, TaskUpdatePatch, TaskUpdateOut
from event_planner.schemas.user import Requester
from event_planner.services.task_update_service import TaskUpdateService
from event_planner.utils.auth import get_current_user

router = APIRouter()


@router.post("", response_model=TaskUpdateOut, status_code=status.HTTP_201_CREATED)
def create_task_update(
    update: TaskUpdateCreate,
    db: Session = Depends(get_db),
    current_user: Requester = Depends(get_current_user),
):
    return TaskUpdateService(db).create(current_user, update)


@router.get("", response_model=List[TaskUpdateOut])
def get_task_updates(db: Session = Depends(get_db), current_user: Requester = Depends(get_current_user)):
    return TaskUpdateService(db).list(current_user)


@router.get("/{update_id}", response_model=TaskUpdateOut)
def get_task_update(update_id: int, db: Session = Depends(get_db), current_user: Requester = Depends(get_current_user)):
    return TaskUpdateService(db).get(current_user, update_id)


@router.put("/{update_id}", response_model=TaskUpdateOut)
def update_task_update(
    update_id: int,
    update: TaskUpdatePatch,
    db: Session = Depends(get_db),
    current_user: Requester = Depends(get_current_user),
):
    return TaskUpdateService(db).update(current_user, update_id, update)


@router.delete("/{update_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task_update(update_id: int, db: Session = Depends(get_db), current_user: Requester = Depends(get_current_user)):
    TaskUpdateService(db).delete(current_user, update_id)
    return None
