"""Task service"""

import logging
from sqlalchemy.orm import Session
from datetime import datetime, timedelta
from typing import List, Optional

from tracker.models.category import Category
from tracker.models.project import Project
from tracker.models.tag import Tag
from tracker.models.task import Task, TaskStatus, task_tags
from tracker.services.base import apply_changes, atomic, check_fields, get_or_raise, require_reference, save
from tracker.services.cascade import purge_tasks

logger = logging.getLogger(__name__)

CLOSED_STATUSES = (TaskStatus.COMPLETED, TaskStatus.CANCELLED)


def create_task(db: Session, project_id, title: str, category_id=None, **fields) -> Task:
    check_fields(Task, fields)
    require_reference(db, Project, project_id, "project_id")
    require_reference(db, Category, category_id, "category_id")

    task = Task(project_id=project_id, category_id=category_id, title=title, **fields)
    save(db, task)

    logger.info(f"Created task {task.id} in project {project_id}")
    return task


def get_task(db: Session, task_id) -> Task:
    return get_or_raise(db, Task, task_id)


def find_tasks_by_project(db: Session, project_id, status: Optional[TaskStatus] = None) -> List[Task]:
    query = db.query(Task).filter(Task.project_id == project_id)

    if status is not None:
        query = query.filter(Task.status == status)

    # position est l'ordre choisi par l'utilisateur, created_at départage
    return query.order_by(Task.position, Task.created_at).all()


def find_tasks_by_category(db: Session, category_id) -> List[Task]:
    return db.query(Task).filter(Task.category_id == category_id).order_by(Task.position).all()


def update_task(db: Session, task_id, **changes) -> Task:
    task = get_task(db, task_id)
    if "category_id" in changes:
        require_reference(db, Category, changes["category_id"], "category_id")
    apply_changes(task, changes, immutable={"project_id"})
    return save(db, task)


def delete_task(db: Session, task_id):
    """Supprime la tâche, ses sessions et ses fichiers ; les tags restent"""
    get_task(db, task_id)
    with atomic(db):
        purge_tasks(db, [task_id])
    logger.info(f"Deleted task {task_id}")


# Tags

def add_tag(db: Session, task_id, tag_id):
    get_task(db, task_id)
    require_reference(db, Tag, tag_id, "tag_id")

    already = db.query(task_tags).filter(
        task_tags.c.task_id == task_id,
        task_tags.c.tag_id == tag_id
    ).first()
    if already:
        return

    with atomic(db):
        db.execute(task_tags.insert().values(task_id=task_id, tag_id=tag_id))


def remove_tag(db: Session, task_id, tag_id):
    with atomic(db):
        db.execute(task_tags.delete().where(
            task_tags.c.task_id == task_id,
            task_tags.c.tag_id == tag_id
        ))


def find_tags_by_task(db: Session, task_id) -> List[Tag]:
    return db.query(Tag).join(
        task_tags, task_tags.c.tag_id == Tag.id
    ).filter(
        task_tags.c.task_id == task_id
    ).order_by(Tag.name).all()


def find_tasks_by_tag(db: Session, tag_id) -> List[Task]:
    return db.query(Task).join(
        task_tags, task_tags.c.task_id == Task.id
    ).filter(
        task_tags.c.tag_id == tag_id
    ).order_by(Task.position).all()


# Vues par échéance (toutes les tâches des projets de l'utilisateur)

def _user_tasks(db: Session, user_id):
    return db.query(Task).join(Project, Project.id == Task.project_id).filter(
        Project.user_id == user_id
    )


def find_tasks_due_today(db: Session, user_id, today=None) -> List[Task]:
    today = today or datetime.today().date()
    day_start = datetime.combine(today, datetime.min.time())
    day_end = datetime.combine(today + timedelta(days=1), datetime.min.time())

    return _user_tasks(db, user_id).filter(
        Task.due_date >= day_start,
        Task.due_date < day_end
    ).order_by(Task.due_date).all()


def find_overdue_tasks(db: Session, user_id, today=None) -> List[Task]:
    today = today or datetime.today().date()
    today_start = datetime.combine(today, datetime.min.time())

    return _user_tasks(db, user_id).filter(
        Task.due_date < today_start,
        Task.status.notin_(CLOSED_STATUSES)
    ).order_by(Task.due_date).all()


def find_tasks_due_this_week(db: Session, user_id, today=None) -> List[Task]:
    today = today or datetime.today().date()
    days_until_end = (6 - today.weekday()) % 7
    if days_until_end == 0:
        days_until_end = 7

    week_end = today + timedelta(days=days_until_end)
    day_start = datetime.combine(today, datetime.min.time())
    end_time = datetime.combine(week_end, datetime.max.time())

    return _user_tasks(db, user_id).filter(
        Task.due_date >= day_start,
        Task.due_date <= end_time
    ).order_by(Task.due_date).all()
