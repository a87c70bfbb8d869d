"""Tag service"""

import logging
from typing import List

from sqlalchemy.orm import Session

from tracker.models.tag import Tag
from tracker.models.user import User
from tracker.services.base import apply_changes, atomic, check_fields, get_or_raise, require_reference, save
from tracker.services.cascade import purge_tags

logger = logging.getLogger(__name__)


def create_tag(db: Session, user_id, name: str, **fields) -> Tag:
    check_fields(Tag, fields)
    require_reference(db, User, user_id, "user_id")
    tag = Tag(user_id=user_id, name=name, **fields)
    return save(db, tag)


def get_tag(db: Session, tag_id) -> Tag:
    return get_or_raise(db, Tag, tag_id)


def find_tags_by_user(db: Session, user_id) -> List[Tag]:
    return db.query(Tag).filter(Tag.user_id == user_id).order_by(Tag.name).all()


def update_tag(db: Session, tag_id, **changes) -> Tag:
    tag = get_tag(db, tag_id)
    apply_changes(tag, changes, immutable={"user_id"})
    return save(db, tag)


def delete_tag(db: Session, tag_id):
    # les tâches associées ne sont pas supprimées
    get_tag(db, tag_id)
    with atomic(db):
        purge_tags(db, [tag_id])
    logger.info(f"Deleted tag {tag_id}")
