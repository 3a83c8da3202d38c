from .event_service import EventService
from .task_service import TaskService
from .task_update_service import TaskUpdateService
