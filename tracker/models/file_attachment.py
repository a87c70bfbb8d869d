import uuid
from sqlalchemy import Column, BigInteger, String, Text, DateTime, ForeignKey, Uuid
from datetime import datetime
from tracker.core.database import Base

class FileAttachment(Base):
    __tablename__ = "file_attachments"
    
    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, ForeignKey("users.id"), nullable=False, index=True)
    project_id = Column(Uuid, ForeignKey("projects.id"), nullable=True, index=True)
    task_id = Column(Uuid, ForeignKey("tasks.id"), nullable=True, index=True)
    original_name = Column(String(255), nullable=False)
    file_name = Column(String(255), nullable=False)  # nom stocké
    file_path = Column(String(500), nullable=False)
    file_size = Column(BigInteger, nullable=True)  # octets
    mime_type = Column(String(100), nullable=False)
    s3_key = Column(String(500), nullable=True)
    s3_url = Column(String(500), nullable=True)
    description = Column(Text, nullable=True)
    uploaded_at = Column(DateTime, default=datetime.utcnow, nullable=False)
