# event_planner/services/task_service.py
from typing import Any, List

from event_planner.models import Task, TaskUpdate
from event_planner.schemas.task import TaskCreate, TaskPatch
from event_planner.schemas.user import Requester
from event_planner.services.base import BaseService, parse_input
from event_planner.utils.ownership import ResourceKind
from event_planner.utils.scoping import scoped_query


class TaskService(BaseService):
    """Tasks are visible to their creator, the event owner and admins.

    Only the owner of the parent event (or an admin) may add tasks to it.
    """

    def create(self, requester: Requester, data: Any) -> Task:
        payload = parse_input(TaskCreate, data)
        # 404 for a missing event, 403 if the requester does not own it
        self.resolver.require_access(requester, ResourceKind.EVENT, payload.event_id)

        task = Task(
            event_id=payload.event_id,
            name=payload.name,
            description=payload.description,
            due_date=payload.due_date,
            status=payload.status,
            created_by=requester.id,
        )
        self.db.add(task)
        self._commit(missing_parent="Event")
        self.db.refresh(task)
        self.logger.info(f"User {requester.id} created task {task.id} under event {task.event_id}")
        return task

    def list(self, requester: Requester) -> List[Task]:
        return self._fetch_all(scoped_query(self.db, requester, ResourceKind.TASK), "tasks")

    def get(self, requester: Requester, task_id: int) -> Task:
        return self.resolver.require_access(requester, ResourceKind.TASK, task_id)

    def update(self, requester: Requester, task_id: int, data: Any) -> Task:
        payload = parse_input(TaskPatch, data)
        task = self.resolver.require_access(requester, ResourceKind.TASK, task_id)

        for field, value in payload.model_dump(exclude_unset=True).items():
            setattr(task, field, value)

        self._commit()
        self.db.refresh(task)
        return task

    def delete(self, requester: Requester, task_id: int) -> None:
        task = self.resolver.require_access(requester, ResourceKind.TASK, task_id)
        self.db.delete(task)
        self._commit()
        self.logger.info(f"User {requester.id} deleted task {task_id}")

    def list_updates(self, requester: Requester, task_id: int) -> List[TaskUpdate]:
        self.resolver.require_access(requester, ResourceKind.TASK, task_id)
        query = self.db.query(TaskUpdate).filter(TaskUpdate.task_id == task_id).order_by(TaskUpdate.id)
        return self._fetch_all(query, "task updates")
