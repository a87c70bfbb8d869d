"""Contraintes d'une tâche"""

import uuid
from pydantic import BaseModel, ConfigDict
from datetime import datetime
from typing import Optional
from tracker.models.task import TaskPriority, TaskStatus
from tracker.schemas.types import NotBlank


class TaskSchema(BaseModel):
    project_id: uuid.UUID
    category_id: Optional[uuid.UUID] = None
    title: NotBlank(300)
    description: Optional[str] = None
    priority: Optional[TaskPriority] = None
    status: Optional[TaskStatus] = None
    due_date: Optional[datetime] = None
    estimated_duration: Optional[int] = None
    actual_duration: Optional[int] = None
    position: Optional[int] = None

    model_config = ConfigDict(from_attributes=True)
