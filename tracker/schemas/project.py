"""Contraintes d'un projet"""

import uuid
from pydantic import BaseModel, ConfigDict
from datetime import date
from typing import Optional
from tracker.models.project import ProjectStatus
from tracker.schemas.types import NotBlank, Color


class ProjectSchema(BaseModel):
    user_id: uuid.UUID
    name: NotBlank(200)
    description: Optional[str] = None
    color: Optional[Color] = None
    status: Optional[ProjectStatus] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    model_config = ConfigDict(from_attributes=True)
