import uuid
from sqlalchemy import Column, Integer, Text, DateTime, Boolean, ForeignKey, Uuid
from datetime import datetime
from tracker.core.database import Base

class TimeSession(Base):
    __tablename__ = "time_sessions"
    
    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, ForeignKey("users.id"), nullable=False, index=True)
    # task et projet sont indépendants l'un de l'autre
    task_id = Column(Uuid, ForeignKey("tasks.id"), nullable=True, index=True)
    project_id = Column(Uuid, ForeignKey("projects.id"), nullable=True, index=True)
    start_time = Column(DateTime, nullable=False)
    end_time = Column(DateTime, nullable=True)
    duration = Column(Integer, nullable=True)  # minutes
    description = Column(Text, nullable=True)
    is_active = Column(Boolean, default=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
