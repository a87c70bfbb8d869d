"""Goal model"""

import enum
import uuid
from sqlalchemy import Column, Integer, String, Text, Date, DateTime, Enum, ForeignKey, Uuid
from datetime import datetime
from tracker.core.database import Base


class GoalStatus(str, enum.Enum):
    ACTIVE = "ACTIVE"
    ACHIEVED = "ACHIEVED"
    ABANDONED = "ABANDONED"


class Goal(Base):
    __tablename__ = "goals"
    
    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, ForeignKey("users.id"), nullable=False, index=True)
    project_id = Column(Uuid, ForeignKey("projects.id"), nullable=True, index=True)
    
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    status = Column(Enum(GoalStatus, name="goal_status"), default=GoalStatus.ACTIVE, nullable=False)
    target_minutes = Column(Integer, nullable=True)  # temps visé
    target_date = Column(Date, nullable=True)
    progress = Column(Integer, default=0)  # pourcentage
    completed_at = Column(DateTime, nullable=True)
    
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
