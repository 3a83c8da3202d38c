# event_planner/models/user.py
import enum

from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship

from event_planner.database import Base, utcnow


class UserRole(str, enum.Enum):
    USER = "USER"
    ADMIN = "ADMIN"


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    role = Column(String, nullable=False, default=UserRole.USER.value)
    created_at = Column(DateTime, default=utcnow, nullable=False)

    events = relationship("Event", back_populates="owner", cascade="all, delete")
    tasks = relationship("Task", back_populates="creator", cascade="all, delete")
    task_updates = relationship("TaskUpdate", back_populates="creator", cascade="all, delete")

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN.value
