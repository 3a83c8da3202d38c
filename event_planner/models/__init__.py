from .user import User, UserRole
from .event import Event
from .task import Task, TaskUpdate, DEFAULT_TASK_STATUS
