import uuid
from sqlalchemy import Column, String, Text, DateTime, ForeignKey, Uuid
from datetime import datetime
from tracker.core.database import Base

class UserPreference(Base):
    __tablename__ = "user_preferences"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, ForeignKey("users.id"), nullable=False, index=True)
    preference_key = Column(String(100), nullable=False)
    preference_value = Column(Text, nullable=True)  # valeur libre
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
