"""Project service"""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from tracker.models.project import Project, ProjectStatus
from tracker.models.user import User
from tracker.services.base import apply_changes, atomic, check_fields, get_or_raise, require_reference, save
from tracker.services.cascade import purge_projects

logger = logging.getLogger(__name__)


def create_project(db: Session, user_id, name: str, **fields) -> Project:
    check_fields(Project, fields)
    require_reference(db, User, user_id, "user_id")

    project = Project(user_id=user_id, name=name, **fields)
    save(db, project)

    logger.info(f"Created project {project.id} for user {user_id}")
    return project


def get_project(db: Session, project_id) -> Project:
    return get_or_raise(db, Project, project_id)


def find_projects_by_user(db: Session, user_id, status: Optional[ProjectStatus] = None) -> List[Project]:
    query = db.query(Project).filter(Project.user_id == user_id)

    if status is not None:
        query = query.filter(Project.status == status)

    return query.order_by(Project.created_at).all()


def update_project(db: Session, project_id, **changes) -> Project:
    project = get_project(db, project_id)
    apply_changes(project, changes, immutable={"user_id"})
    return save(db, project)


def delete_project(db: Session, project_id):
    """Supprime le projet, ses tâches, sessions, objectifs et fichiers"""
    get_project(db, project_id)
    with atomic(db):
        purge_projects(db, [project_id])
    logger.info(f"Deleted project {project_id}")
