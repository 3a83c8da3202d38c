# event_planner/routers/tasks.py
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from event_planner.database import get_db
from event_planner.schemas.task import TaskCreate, TaskPatch, TaskOut
from event_planner.schemas.task_update import TaskUpdateOut
from event_planner.schemas.user import Requester
from event_planner.services.task_service import TaskService
from event_planner.utils.auth import get_current_user

router = APIRouter()


@router.post("", response_model=TaskOut, status_code=status.HTTP_201_CREATED)
def create_task(
    task: TaskCreate,
    db: Session = Depends(get_db),
    current_user: Requester = Depends(get_current_user),
):
    """Create a task under an event - only the event owner or an admin"""
    return TaskService(db).create(current_user, task)


@router.get("", response_model=List[TaskOut])
def get_tasks(db: Session = Depends(get_db), current_user: Requester = Depends(get_current_user)):
    """List tasks the user created or that belong to events the user owns"""
    return TaskService(db).list(current_user)


@router.get("/{task_id}", response_model=TaskOut)
def get_task(task_id: int, db: Session = Depends(get_db), current_user: Requester = Depends(get_current_user)):
    return TaskService(db).get(current_user, task_id)


@router.put("/{task_id}", response_model=TaskOut)
def update_task(
    task_id: int,
    task_update: TaskPatch,
    db: Session = Depends(get_db),
    current_user: Requester = Depends(get_current_user),
):
    return TaskService(db).update(current_user, task_id, task_update)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(task_id: int, db: Session = Depends(get_db), current_user: Requester = Depends(get_current_user)):
    TaskService(db).delete(current_user, task_id)
    return None


@router.get("/{task_id}/updates", response_model=List[TaskUpdateOut])
def get_task_updates(task_id: int, db: Session = Depends(get_db), current_user: Requester = Depends(get_current_user)):
    """Progress updates posted on a task"""
    return TaskService(db).list_updates(current_user, task_id)
