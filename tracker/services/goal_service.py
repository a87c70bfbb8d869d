import logging
from typing import List

from sqlalchemy.orm import Session

from tracker.models.goal import Goal
from tracker.models.project import Project
from tracker.models.user import User
from tracker.services.base import apply_changes, atomic, check_fields, get_or_raise, require_reference, save

logger = logging.getLogger(__name__)


def create_goal(db: Session, user_id, title: str, project_id=None, **fields) -> Goal:
    check_fields(Goal, fields)
    require_reference(db, User, user_id, "user_id")
    require_reference(db, Project, project_id, "project_id")

    goal = Goal(user_id=user_id, project_id=project_id, title=title, **fields)
    return save(db, goal)


def get_goal(db: Session, goal_id) -> Goal:
    return get_or_raise(db, Goal, goal_id)


def find_goals_by_user(db: Session, user_id) -> List[Goal]:
    return db.query(Goal).filter(Goal.user_id == user_id).order_by(Goal.created_at).all()


def find_goals_by_project(db: Session, project_id) -> List[Goal]:
    return db.query(Goal).filter(Goal.project_id == project_id).order_by(Goal.created_at).all()


def update_goal(db: Session, goal_id, **changes) -> Goal:
    goal = get_goal(db, goal_id)
    if "project_id" in changes:
        require_reference(db, Project, changes["project_id"], "project_id")
    apply_changes(goal, changes, immutable={"user_id"})
    return save(db, goal)


def delete_goal(db: Session, goal_id):
    goal = get_goal(db, goal_id)
    with atomic(db):
        db.delete(goal)
    logger.info(f"Deleted goal {goal_id}")
