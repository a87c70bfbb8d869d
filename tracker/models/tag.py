import uuid
from sqlalchemy import Column, String, DateTime, ForeignKey, Uuid
from datetime import datetime
from tracker.core.database import Base

class Tag(Base):
    __tablename__ = "tags"
    
    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String(50), nullable=False)
    color = Column(String(7), default="#8B5CF6")
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
