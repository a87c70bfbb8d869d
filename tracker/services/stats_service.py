from sqlalchemy.orm import Session
from sqlalchemy import func
from datetime import datetime, timedelta
from typing import Optional

from tracker.models.project import Project
from tracker.models.task import Task, TaskStatus
from tracker.models.time_session import TimeSession
from tracker.services.time_session_service import find_active_session


class DashboardStats:
    def __init__(
        self,
        total_projects: int,
        active_tasks: int,
        completed_tasks: int,
        total_time_today: int,
        current_session: Optional[TimeSession]
    ):
        self.total_projects = total_projects
        self.active_tasks = active_tasks
        self.completed_tasks = completed_tasks
        self.total_time_today = total_time_today  # minutes
        self.current_session = current_session


def count_tasks_by_status(db: Session, user_id) -> dict:
    rows = db.query(Task.status, func.count(Task.id)).join(
        Project, Project.id == Task.project_id
    ).filter(
        Project.user_id == user_id
    ).group_by(Task.status).all()

    counts = {status: 0 for status in TaskStatus}
    for status, count in rows:
        counts[TaskStatus(status)] = count
    return counts


def _session_minutes(session: TimeSession, now: datetime) -> int:
    if session.duration is not None:
        return session.duration

    # session en cours : le temps court jusqu'à maintenant
    if session.end_time is not None:
        end = session.end_time
    elif session.is_active:
        end = now
    else:
        return 0
    return max(0, int((end - session.start_time).total_seconds() // 60))


def minutes_tracked_on(db: Session, user_id, day, now=None) -> int:
    now = now or datetime.utcnow()
    day_start = datetime.combine(day, datetime.min.time())
    day_end = datetime.combine(day + timedelta(days=1), datetime.min.time())

    sessions = db.query(TimeSession).filter(
        TimeSession.user_id == user_id,
        TimeSession.start_time >= day_start,
        TimeSession.start_time < day_end
    ).all()
    return sum(_session_minutes(session, now) for session in sessions)


def get_dashboard_stats(db: Session, user_id, today=None, now=None) -> DashboardStats:
    today = today or datetime.today().date()

    total_projects = db.query(func.count(Project.id)).filter(Project.user_id == user_id).scalar()

    active = 0
    completed = 0
    for status, count in count_tasks_by_status(db, user_id).items():
        if status in (TaskStatus.TODO, TaskStatus.IN_PROGRESS):
            active += count
        elif status == TaskStatus.COMPLETED:
            completed += count
        elif status == TaskStatus.CANCELLED:
            continue
        else:
            raise ValueError(f"Unhandled task status: {status}")

    return DashboardStats(
        total_projects=total_projects,
        active_tasks=active,
        completed_tasks=completed,
        total_time_today=minutes_tracked_on(db, user_id, today, now),
        current_session=find_active_session(db, user_id)
    )
