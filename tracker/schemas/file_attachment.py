import uuid
from pydantic import BaseModel, ConfigDict
from typing import Optional
from tracker.schemas.types import NotBlank, Bounded

class FileAttachmentSchema(BaseModel):
    user_id: uuid.UUID
    project_id: Optional[uuid.UUID] = None
    task_id: Optional[uuid.UUID] = None
    original_name: NotBlank(255)
    file_name: NotBlank(255)
    file_path: NotBlank(500)
    file_size: Optional[int] = None
    mime_type: NotBlank(100)
    s3_key: Optional[Bounded(500)] = None
    s3_url: Optional[Bounded(500)] = None
    description: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)
