"""User service"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from tracker.core.errors import UniquenessConflict
from tracker.models.user import User
from tracker.services.base import apply_changes, atomic, check_fields, get_or_raise, save
from tracker.services.cascade import purge_user

logger = logging.getLogger(__name__)


def create_user(db: Session, username: str, email: str, password: str, **fields) -> User:
    check_fields(User, fields)

    # Vérifie si l'email ou le username existe déjà
    if get_user_by_email(db, email):
        raise UniquenessConflict("email", email)
    if get_user_by_username(db, username):
        raise UniquenessConflict("username", username)

    user = User(username=username, email=email, **fields)
    user.set_password(password)
    save(db, user)

    logger.info(f"Created user {user.id} ({user.username})")
    return user


def get_user(db: Session, user_id) -> User:
    return get_or_raise(db, User, user_id)


def get_user_by_username(db: Session, username: str) -> Optional[User]:
    return db.query(User).filter(User.username == username).first()


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()


def authenticate_user(db: Session, email: str, password: str) -> Optional[User]:
    user = get_user_by_email(db, email)
    if not user or not user.is_active:
        return None
    if not user.verify_password(password):
        return None
    return user


def update_user(db: Session, user_id, **changes) -> User:
    user = get_user(db, user_id)

    if "username" in changes and changes["username"] != user.username:
        if get_user_by_username(db, changes["username"]):
            raise UniquenessConflict("username", changes["username"])
    if "email" in changes and changes["email"] != user.email:
        if get_user_by_email(db, changes["email"]):
            raise UniquenessConflict("email", changes["email"])

    apply_changes(user, changes)
    return save(db, user)


def change_password(db: Session, user_id, new_password: str) -> User:
    user = get_user(db, user_id)
    user.set_password(new_password)
    return save(db, user)


def delete_user(db: Session, user_id):
    """Supprime l'utilisateur et tout ce qu'il possède"""
    get_user(db, user_id)
    with atomic(db):
        purge_user(db, user_id)
    logger.info(f"Deleted user {user_id}")
