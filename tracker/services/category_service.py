import logging
from typing import List

from sqlalchemy.orm import Session

from tracker.models.category import Category
from tracker.models.user import User
from tracker.services.base import apply_changes, atomic, check_fields, get_or_raise, require_reference, save
from tracker.services.cascade import purge_categories

logger = logging.getLogger(__name__)


def create_category(db: Session, user_id, name: str, **fields) -> Category:
    check_fields(Category, fields)
    require_reference(db, User, user_id, "user_id")
    category = Category(user_id=user_id, name=name, **fields)
    return save(db, category)


def get_category(db: Session, category_id) -> Category:
    return get_or_raise(db, Category, category_id)


def find_categories_by_user(db: Session, user_id) -> List[Category]:
    return db.query(Category).filter(Category.user_id == user_id).order_by(Category.name).all()


def update_category(db: Session, category_id, **changes) -> Category:
    category = get_category(db, category_id)
    apply_changes(category, changes, immutable={"user_id"})
    return save(db, category)


def delete_category(db: Session, category_id):
    """Supprime la catégorie, ses tâches perdent simplement leur catégorie"""
    get_category(db, category_id)
    with atomic(db):
        purge_categories(db, [category_id])
    logger.info(f"Deleted category {category_id}")
