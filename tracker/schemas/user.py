from pydantic import BaseModel, EmailStr, ConfigDict
from typing import Optional
from tracker.schemas.types import NotBlank, Bounded

class UserSchema(BaseModel):
    username: NotBlank(50)
    email: EmailStr
    password_hash: NotBlank(255)
    first_name: Optional[Bounded(100)] = None
    last_name: Optional[Bounded(100)] = None
    avatar_url: Optional[Bounded(500)] = None
    timezone: Optional[Bounded(50)] = None
    is_active: Optional[bool] = None

    model_config = ConfigDict(from_attributes=True)
