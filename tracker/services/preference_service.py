import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from tracker.models.user import User
from tracker.models.user_preference import UserPreference
from tracker.services.base import atomic, require_reference, save

logger = logging.getLogger(__name__)


def get_preference(db: Session, user_id, key: str) -> Optional[UserPreference]:
    return db.query(UserPreference).filter(
        UserPreference.user_id == user_id,
        UserPreference.preference_key == key
    ).first()


def get_preference_value(db: Session, user_id, key: str, default: Optional[str] = None) -> Optional[str]:
    preference = get_preference(db, user_id, key)
    if preference is None:
        return default
    return preference.preference_value


def list_preferences(db: Session, user_id) -> List[UserPreference]:
    return db.query(UserPreference).filter(
        UserPreference.user_id == user_id
    ).order_by(UserPreference.preference_key).all()


def set_preference(db: Session, user_id, key: str, value: Optional[str]) -> UserPreference:
    """Crée la préférence ou remplace sa valeur"""
    require_reference(db, User, user_id, "user_id")

    preference = get_preference(db, user_id, key)
    if preference is None:
        preference = UserPreference(user_id=user_id, preference_key=key, preference_value=value)
    else:
        preference.preference_value = value

    return save(db, preference)


def delete_preference(db: Session, user_id, key: str) -> bool:
    preference = get_preference(db, user_id, key)
    if preference is None:
        return False

    with atomic(db):
        db.delete(preference)
    logger.info(f"Deleted preference {key} for user {user_id}")
    return True
