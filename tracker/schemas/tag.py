import uuid
from pydantic import BaseModel, ConfigDict
from typing import Optional
from tracker.schemas.types import NotBlank, Color

class TagSchema(BaseModel):
    user_id: uuid.UUID
    name: NotBlank(50)
    color: Optional[Color] = None

    model_config = ConfigDict(from_attributes=True)
