from .user import UserCreate, UserLogin, UserOut, UserRef, Requester
from .tokens import Token, AccessToken, RefreshRequest, RegisterResponse
from .event import EventCreate, EventPatch, EventOut
from .task import TaskCreate, TaskPatch, TaskOut
from .task_update import TaskUpdateCreate, TaskUpdatePatch, TaskUpdateOut
