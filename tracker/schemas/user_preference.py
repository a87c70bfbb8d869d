import uuid
from pydantic import BaseModel, ConfigDict
from typing import Optional
from tracker.schemas.types import NotBlank

class UserPreferenceSchema(BaseModel):
    user_id: uuid.UUID
    preference_key: NotBlank(100)
    preference_value: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)
