# event_planner/models/task.py
from sqlalchemy import Column, Integer, String, Text, Date, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from event_planner.database import Base, utcnow

DEFAULT_TASK_STATUS = "To Do"


class Task(Base):
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, index=True)
    event_id = Column(Integer, ForeignKey("events.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(100), nullable=False, index=True)
    description = Column(Text, nullable=True)

    # Free-form; the frontend uses "To Do" and "Completed"
    status = Column(String, nullable=False, default=DEFAULT_TASK_STATUS)
    due_date = Column(Date, nullable=True)

    # Creator of the task, independent of the event owner
    created_by = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)

    # Relationships
    event = relationship("Event", back_populates="tasks")
    creator = relationship("User", foreign_keys=[created_by], back_populates="tasks")
    updates = relationship(
        "TaskUpdate",
        back_populates="task",
        cascade="all, delete",
        order_by="TaskUpdate.id",
    )


class TaskUpdate(Base):
    __tablename__ = "task_updates"

    id = Column(Integer, primary_key=True, index=True)
    task_id = Column(Integer, ForeignKey("tasks.id", ondelete="CASCADE"), nullable=False, index=True)
    update_text = Column(String(500), nullable=False)
    created_by = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    # Relationships
    task = relationship("Task", back_populates="updates")
    creator = relationship("User", foreign_keys=[created_by], back_populates="task_updates")
