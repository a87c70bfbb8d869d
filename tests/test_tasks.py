import uuid
from datetime import date, datetime, timedelta

import pytest
from sqlalchemy.exc import IntegrityError

from tracker.core.database import SessionLocal
from tracker.core.errors import ReferentialIntegrityError, ValidationFailed
from tracker.models.file_attachment import FileAttachment
from tracker.models.project import Project
from tracker.models.tag import Tag
from tracker.models.task import Task, TaskPriority, TaskStatus
from tracker.models.time_session import TimeSession
from tracker.services.attachment_service import create_attachment
from tracker.services.category_service import create_category, delete_category
from tracker.services.project_service import create_project
from tracker.services.tag_service import create_tag
from tracker.services.task_service import (
    add_tag,
    create_task,
    delete_task,
    find_overdue_tasks,
    find_tags_by_task,
    find_tasks_by_category,
    find_tasks_by_project,
    find_tasks_by_tag,
    find_tasks_due_this_week,
    find_tasks_due_today,
    get_task,
    remove_tag,
    update_task,
)
from tracker.services.time_session_service import create_session


# ========== TEST CREATE TASK ==========
def test_create_task_defaults(db, project):
    task = create_task(db, project.id, "Ma première tâche")

    reader = SessionLocal()
    stored = reader.get(Task, task.id)
    assert stored.project_id == project.id
    assert stored.category_id is None
    assert stored.priority == TaskPriority.MEDIUM
    assert stored.status == TaskStatus.TODO
    assert stored.actual_duration == 0
    assert stored.position == 0
    assert stored.estimated_duration is None
    reader.close()


def test_create_task_all_fields(db, project):
    due = datetime(2026, 11, 2, 9, 30)
    task = create_task(
        db, project.id, "Préparer la démo",
        description="slides + script",
        priority=TaskPriority.URGENT,
        status=TaskStatus.IN_PROGRESS,
        due_date=due,
        estimated_duration=90,
        position=3
    )

    assert task.priority == TaskPriority.URGENT
    assert task.status == TaskStatus.IN_PROGRESS
    assert task.due_date == due
    assert task.estimated_duration == 90
    assert task.position == 3


def test_task_without_project_fails_at_write(db):
    """Sans service, la colonne project_id NOT NULL est appliquée par la base"""
    db.add(Task(title="Orpheline"))
    with pytest.raises(IntegrityError):
        db.commit()
    db.rollback()


def test_task_with_dangling_project_fails_at_write(db):
    db.add(Task(title="Fantôme", project_id=uuid.uuid4()))
    with pytest.raises(IntegrityError):
        db.commit()
    db.rollback()


def test_create_task_without_project_rejected(db):
    with pytest.raises(ValidationFailed) as exc:
        create_task(db, None, "Sans projet")

    violation = exc.value.violations[0]
    assert violation.field == "project_id"
    assert violation.rule == "required"


def test_create_task_for_missing_project(db):
    with pytest.raises(ReferentialIntegrityError):
        create_task(db, uuid.uuid4(), "Projet inconnu")


def test_task_title_too_long(db, project):
    with pytest.raises(ValidationFailed) as exc:
        create_task(db, project.id, "t" * 301)

    assert exc.value.violations[0].field == "title"
    assert exc.value.violations[0].rule == "max_length"
    assert db.query(Task).count() == 0


def test_task_priority_outside_enum(db, project):
    with pytest.raises(ValidationFailed) as exc:
        create_task(db, project.id, "Prio", priority="CRITICAL")

    assert exc.value.violations[0].rule == "enum"


def test_create_task_with_null_status_rejected(db, project):
    with pytest.raises(ValidationFailed) as exc:
        create_task(db, project.id, "Sans statut", status=None)

    assert exc.value.violations[0].field == "status"
    assert exc.value.violations[0].rule == "required"
    assert db.query(Task).count() == 0


# ========== TEST UPDATE ==========
def test_update_task_status(db, project):
    task = create_task(db, project.id, "A faire")

    updated = update_task(db, task.id, status=TaskStatus.COMPLETED, actual_duration=45)

    assert updated.status == TaskStatus.COMPLETED
    assert updated.actual_duration == 45


def test_move_task_to_other_project_rejected(db, user, project):
    other = create_project(db, user.id, "Autre")
    task = create_task(db, project.id, "Fixe")

    with pytest.raises(ValidationFailed) as exc:
        update_task(db, task.id, project_id=other.id)

    assert exc.value.violations[0].rule == "immutable"


def test_update_task_priority_to_none_rejected(db, project):
    task = create_task(db, project.id, "Prioritaire", priority=TaskPriority.HIGH)

    with pytest.raises(ValidationFailed) as exc:
        update_task(db, task.id, priority=None)

    assert exc.value.violations[0].field == "priority"
    assert exc.value.violations[0].rule == "required"

    reader = SessionLocal()
    assert reader.get(Task, task.id).priority == TaskPriority.HIGH
    reader.close()


# ========== TEST ORDER ==========
def test_find_tasks_by_project_ordered_by_position(db, project):
    create_task(db, project.id, "Troisième", position=2)
    create_task(db, project.id, "Première", position=0)
    create_task(db, project.id, "Deuxième", position=1)

    tasks = find_tasks_by_project(db, project.id)

    assert [t.title for t in tasks] == ["Première", "Deuxième", "Troisième"]


def test_positions_are_not_unique(db, project):
    create_task(db, project.id, "A", position=1)
    create_task(db, project.id, "B", position=1)

    assert len(find_tasks_by_project(db, project.id)) == 2


def test_find_tasks_by_project_status_filter(db, project):
    create_task(db, project.id, "Ouverte")
    create_task(db, project.id, "Finie", status=TaskStatus.COMPLETED)

    done = find_tasks_by_project(db, project.id, status=TaskStatus.COMPLETED)
    assert [t.title for t in done] == ["Finie"]


# ========== TEST TAGS ==========
def test_task_with_two_tags(db, user, project):
    """Associer deux tags puis en retirer un laisse l'autre intact"""
    task = create_task(db, project.id, "Taguée")
    work = create_tag(db, user.id, "travail")
    urgent = create_tag(db, user.id, "urgent")

    add_tag(db, task.id, work.id)
    add_tag(db, task.id, urgent.id)

    assert {t.id for t in find_tags_by_task(db, task.id)} == {work.id, urgent.id}

    remove_tag(db, task.id, work.id)

    assert [t.id for t in find_tags_by_task(db, task.id)] == [urgent.id]
    assert db.query(Tag).count() == 2
    assert db.query(Task).count() == 1


def test_add_tag_twice_is_idempotent(db, user, project):
    task = create_task(db, project.id, "Une fois")
    tag = create_tag(db, user.id, "focus")

    add_tag(db, task.id, tag.id)
    add_tag(db, task.id, tag.id)

    assert len(find_tags_by_task(db, task.id)) == 1


def test_find_tasks_by_tag(db, user, project):
    first = create_task(db, project.id, "Un", position=0)
    second = create_task(db, project.id, "Deux", position=1)
    create_task(db, project.id, "Sans tag")
    tag = create_tag(db, user.id, "perso")
    add_tag(db, task_id=second.id, tag_id=tag.id)
    add_tag(db, task_id=first.id, tag_id=tag.id)

    assert [t.title for t in find_tasks_by_tag(db, tag.id)] == ["Un", "Deux"]


def test_add_missing_tag(db, project):
    task = create_task(db, project.id, "Tâche")
    with pytest.raises(ReferentialIntegrityError):
        add_tag(db, task.id, uuid.uuid4())


# ========== TEST CATEGORY ==========
def test_task_category_is_optional(db, user, project):
    category = create_category(db, user.id, "Admin")
    with_category = create_task(db, project.id, "Classée", category_id=category.id)
    create_task(db, project.id, "Non classée")

    assert [t.id for t in find_tasks_by_category(db, category.id)] == [with_category.id]


def test_delete_category_keeps_tasks(db, user, project):
    category = create_category(db, user.id, "Temporaire")
    task = create_task(db, project.id, "Classée", category_id=category.id)

    delete_category(db, category.id)

    assert get_task(db, task.id).category_id is None


# ========== TEST DELETE ==========
def test_delete_task_cascades(db, user, project):
    """Supprimer une tâche supprime ses sessions et fichiers, pas ses tags"""
    task = create_task(db, project.id, "A supprimer")
    tag = create_tag(db, user.id, "garde")
    add_tag(db, task.id, tag.id)
    create_session(db, user.id, datetime.utcnow(), task_id=task.id)
    create_attachment(db, user.id, "notes.txt", "n.txt", "/f/n.txt", 5, "text/plain", task_id=task.id)

    delete_task(db, task.id)

    assert db.query(Task).count() == 0
    assert db.query(TimeSession).count() == 0
    assert db.query(FileAttachment).count() == 0
    assert db.query(Tag).count() == 1
    assert db.query(Project).count() == 1
    assert find_tasks_by_tag(db, tag.id) == []


# ========== TEST ECHEANCES ==========
def test_due_date_views(db, user, project, other_user):
    today = date(2026, 10, 21)  # mercredi
    noon = datetime(2026, 10, 21, 12, 0)

    create_task(db, project.id, "Aujourd'hui", due_date=noon)
    create_task(db, project.id, "En retard", due_date=noon - timedelta(days=2))
    create_task(db, project.id, "Finie en retard", due_date=noon - timedelta(days=3), status=TaskStatus.COMPLETED)
    create_task(db, project.id, "Annulée en retard", due_date=noon - timedelta(days=3), status=TaskStatus.CANCELLED)
    create_task(db, project.id, "Dimanche", due_date=datetime(2026, 10, 25, 18, 0))
    create_task(db, project.id, "Semaine prochaine", due_date=noon + timedelta(days=7))

    foreign = create_project(db, other_user.id, "Pas à moi")
    create_task(db, foreign.id, "Autre user", due_date=noon)

    assert [t.title for t in find_tasks_due_today(db, user.id, today=today)] == ["Aujourd'hui"]
    assert [t.title for t in find_overdue_tasks(db, user.id, today=today)] == ["En retard"]
    assert [t.title for t in find_tasks_due_this_week(db, user.id, today=today)] == ["Aujourd'hui", "Dimanche"]
