import uuid
from pydantic import BaseModel, ConfigDict
from typing import Optional
from tracker.schemas.types import NotBlank, Color

class CategorySchema(BaseModel):
    user_id: uuid.UUID
    name: NotBlank(100)
    description: Optional[str] = None
    color: Optional[Color] = None

    model_config = ConfigDict(from_attributes=True)
