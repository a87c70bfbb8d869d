"""Time session service"""

import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy.orm import Session

from tracker.models.project import Project
from tracker.models.task import Task
from tracker.models.time_session import TimeSession
from tracker.models.user import User
from tracker.services.base import apply_changes, atomic, check_fields, get_or_raise, require_reference, save

logger = logging.getLogger(__name__)


def create_session(
    db: Session,
    user_id,
    start_time: datetime,
    task_id=None,
    project_id=None,
    **fields
) -> TimeSession:
    check_fields(TimeSession, fields)
    require_reference(db, User, user_id, "user_id")
    require_reference(db, Task, task_id, "task_id")
    require_reference(db, Project, project_id, "project_id")

    session = TimeSession(
        user_id=user_id,
        start_time=start_time,
        task_id=task_id,
        project_id=project_id,
        **fields
    )
    return save(db, session)


def get_session(db: Session, session_id) -> TimeSession:
    return get_or_raise(db, TimeSession, session_id)


def find_sessions_by_user(db: Session, user_id) -> List[TimeSession]:
    return db.query(TimeSession).filter(
        TimeSession.user_id == user_id
    ).order_by(TimeSession.start_time.desc()).all()


def find_sessions_by_task(db: Session, task_id) -> List[TimeSession]:
    return db.query(TimeSession).filter(
        TimeSession.task_id == task_id
    ).order_by(TimeSession.start_time.desc()).all()


def find_sessions_by_project(db: Session, project_id) -> List[TimeSession]:
    return db.query(TimeSession).filter(
        TimeSession.project_id == project_id
    ).order_by(TimeSession.start_time.desc()).all()


def find_active_session(db: Session, user_id) -> Optional[TimeSession]:
    return db.query(TimeSession).filter(
        TimeSession.user_id == user_id,
        TimeSession.is_active == True
    ).order_by(TimeSession.start_time.desc()).first()


def update_session(db: Session, session_id, **changes) -> TimeSession:
    session = get_session(db, session_id)
    if "task_id" in changes:
        require_reference(db, Task, changes["task_id"], "task_id")
    if "project_id" in changes:
        require_reference(db, Project, changes["project_id"], "project_id")
    apply_changes(session, changes, immutable={"user_id"})
    return save(db, session)


def delete_session(db: Session, session_id):
    session = get_session(db, session_id)
    with atomic(db):
        db.delete(session)
    logger.info(f"Deleted time session {session_id}")
