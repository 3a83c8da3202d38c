# event_planner/services/task_update_service.py
from typing import Any, List

from event_planner.models import TaskUpdate
from event_planner.schemas.task_update import TaskUpdateCreate, TaskUpdatePatch
from event_planner.schemas.user import Requester
from event_planner.services.base import BaseService, parse_input
from event_planner.utils.ownership import ResourceKind
from event_planner.utils.scoping import scoped_query


class TaskUpdateService(BaseService):
    def create(self, requester: Requester, data: Any) -> TaskUpdate:
        payload = parse_input(TaskUpdateCreate, data)
        # Anyone on the task's chain (task creator, event owner, admin) may post
        self.resolver.require_access(requester, ResourceKind.TASK, payload.task_id)

        update = TaskUpdate(
            task_id=payload.task_id,
            update_text=payload.update_text,
            created_by=requester.id,
        )
        self.db.add(update)
        self._commit(missing_parent="Task")
        self.db.refresh(update)
        self.logger.info(f"User {requester.id} added update {update.id} to task {update.task_id}")
        return update

    def list(self, requester: Requester) -> List[TaskUpdate]:
        return self._fetch_all(
            scoped_query(self.db, requester, ResourceKind.TASK_UPDATE), "task updates"
        )

    def get(self, requester: Requester, update_id: int) -> TaskUpdate:
        return self.resolver.require_access(requester, ResourceKind.TASK_UPDATE, update_id)

    def update(self, requester: Requester, update_id: int, data: Any) -> TaskUpdate:
        payload = parse_input(TaskUpdatePatch, data)
        update = self.resolver.require_access(requester, ResourceKind.TASK_UPDATE, update_id)

        changes = payload.model_dump(exclude_unset=True)
        for field, value in changes.items():
            setattr(update, field, value)

        self._commit()
        self.db.refresh(update)
        return update

    def delete(self, requester: Requester, update_id: int) -> None:
        update = self.resolver.require_access(requester, ResourceKind.TASK_UPDATE, update_id)
        self.db.delete(update)
        self._commit()
        self.logger.info(f"User {requester.id} deleted task update {update_id}")
