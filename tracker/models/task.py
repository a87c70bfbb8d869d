"""Task model"""

import enum
import uuid
from sqlalchemy import Column, Integer, String, Text, DateTime, Enum, ForeignKey, Table, Uuid
from datetime import datetime
from tracker.core.database import Base


class TaskPriority(str, enum.Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    URGENT = "URGENT"


class TaskStatus(str, enum.Enum):
    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


# association Task <-> Tag
task_tags = Table(
    "task_tags",
    Base.metadata,
    Column("task_id", Uuid, ForeignKey("tasks.id"), primary_key=True),
    Column("tag_id", Uuid, ForeignKey("tags.id"), primary_key=True),
)


class Task(Base):
    __tablename__ = "tasks"
    
    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    project_id = Column(Uuid, ForeignKey("projects.id"), nullable=False, index=True)
    category_id = Column(Uuid, ForeignKey("categories.id"), nullable=True, index=True)
    
    title = Column(String(300), nullable=False)
    description = Column(Text, nullable=True)
    priority = Column(Enum(TaskPriority, name="task_priority"), default=TaskPriority.MEDIUM, nullable=False)
    status = Column(Enum(TaskStatus, name="task_status"), default=TaskStatus.TODO, nullable=False)
    due_date = Column(DateTime, nullable=True, index=True)
    estimated_duration = Column(Integer, nullable=True)  # minutes
    actual_duration = Column(Integer, default=0)  # minutes
    position = Column(Integer, default=0)  # ordre dans le projet, géré par l'appelant
    
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
