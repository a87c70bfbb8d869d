import uuid
from pydantic import BaseModel, ConfigDict
from datetime import date, datetime
from typing import Optional
from tracker.models.goal import GoalStatus
from tracker.schemas.types import NotBlank

class GoalSchema(BaseModel):
    user_id: uuid.UUID
    project_id: Optional[uuid.UUID] = None
    title: NotBlank(200)
    description: Optional[str] = None
    status: Optional[GoalStatus] = None
    target_minutes: Optional[int] = None
    target_date: Optional[date] = None
    progress: Optional[int] = None
    completed_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
