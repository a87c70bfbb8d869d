"""
Suppressions en cascade explicites.

Chaque fonction purge_* supprime les enfants avant le parent, sans commit :
l'appelant l'exécute dans atomic() pour que toute la cascade soit une seule
transaction. Les associations optionnelles (Task.category_id) sont remises
à NULL au lieu d'être supprimées.
"""

import logging
from typing import List

from sqlalchemy.orm import Session

from tracker.models.category import Category
from tracker.models.file_attachment import FileAttachment
from tracker.models.goal import Goal
from tracker.models.project import Project
from tracker.models.tag import Tag
from tracker.models.task import Task, task_tags
from tracker.models.time_session import TimeSession
from tracker.models.user import User
from tracker.models.user_preference import UserPreference

logger = logging.getLogger(__name__)


def _ids(db: Session, column, criterion) -> List:
    return [row[0] for row in db.query(column).filter(criterion).all()]


def _delete(db: Session, model, criterion) -> int:
    return db.query(model).filter(criterion).delete(synchronize_session=False)


def purge_tasks(db: Session, task_ids: List) -> int:
    if not task_ids:
        return 0
    db.execute(task_tags.delete().where(task_tags.c.task_id.in_(task_ids)))
    _delete(db, TimeSession, TimeSession.task_id.in_(task_ids))
    _delete(db, FileAttachment, FileAttachment.task_id.in_(task_ids))
    return _delete(db, Task, Task.id.in_(task_ids))


def purge_projects(db: Session, project_ids: List) -> int:
    if not project_ids:
        return 0
    purge_tasks(db, _ids(db, Task.id, Task.project_id.in_(project_ids)))
    _delete(db, TimeSession, TimeSession.project_id.in_(project_ids))
    _delete(db, Goal, Goal.project_id.in_(project_ids))
    _delete(db, FileAttachment, FileAttachment.project_id.in_(project_ids))
    return _delete(db, Project, Project.id.in_(project_ids))


def purge_tags(db: Session, tag_ids: List) -> int:
    if not tag_ids:
        return 0
    # retire les associations, les tâches restent
    db.execute(task_tags.delete().where(task_tags.c.tag_id.in_(tag_ids)))
    return _delete(db, Tag, Tag.id.in_(tag_ids))


def purge_categories(db: Session, category_ids: List) -> int:
    if not category_ids:
        return 0
    db.query(Task).filter(Task.category_id.in_(category_ids)).update(
        {Task.category_id: None}, synchronize_session=False
    )
    return _delete(db, Category, Category.id.in_(category_ids))


def purge_user(db: Session, user_id) -> int:
    project_ids = _ids(db, Project.id, Project.user_id == user_id)
    purge_projects(db, project_ids)

    purge_tags(db, _ids(db, Tag.id, Tag.user_id == user_id))
    purge_categories(db, _ids(db, Category.id, Category.user_id == user_id))

    _delete(db, TimeSession, TimeSession.user_id == user_id)
    _delete(db, Goal, Goal.user_id == user_id)
    _delete(db, FileAttachment, FileAttachment.user_id == user_id)
    _delete(db, UserPreference, UserPreference.user_id == user_id)

    deleted = _delete(db, User, User.id == user_id)
    logger.info(f"Purged user {user_id} with {len(project_ids)} project(s)")
    return deleted
