"""
File attachment service.

Les fichiers eux-mêmes vivent ailleurs (disque ou stockage objet) ;
on ne garde ici que la référence : chemin, clé et URL.
"""

import logging
from typing import List

from sqlalchemy.orm import Session

from tracker.models.file_attachment import FileAttachment
from tracker.models.project import Project
from tracker.models.task import Task
from tracker.models.user import User
from tracker.services.base import apply_changes, atomic, check_fields, get_or_raise, require_reference, save

logger = logging.getLogger(__name__)


def create_attachment(
    db: Session,
    user_id,
    original_name: str,
    file_name: str,
    file_path: str,
    file_size: int,
    mime_type: str,
    project_id=None,
    task_id=None,
    **fields
) -> FileAttachment:
    check_fields(FileAttachment, fields)
    require_reference(db, User, user_id, "user_id")
    require_reference(db, Project, project_id, "project_id")
    require_reference(db, Task, task_id, "task_id")

    attachment = FileAttachment(
        user_id=user_id,
        project_id=project_id,
        task_id=task_id,
        original_name=original_name,
        file_name=file_name,
        file_path=file_path,
        file_size=file_size,
        mime_type=mime_type,
        **fields
    )
    save(db, attachment)

    logger.info(f"Recorded attachment {attachment.id} ({original_name}) for user {user_id}")
    return attachment


def get_attachment(db: Session, attachment_id) -> FileAttachment:
    return get_or_raise(db, FileAttachment, attachment_id)


def find_attachments_by_user(db: Session, user_id) -> List[FileAttachment]:
    return db.query(FileAttachment).filter(
        FileAttachment.user_id == user_id
    ).order_by(FileAttachment.uploaded_at.desc()).all()


def find_attachments_by_project(db: Session, project_id) -> List[FileAttachment]:
    return db.query(FileAttachment).filter(
        FileAttachment.project_id == project_id
    ).order_by(FileAttachment.uploaded_at.desc()).all()


def find_attachments_by_task(db: Session, task_id) -> List[FileAttachment]:
    return db.query(FileAttachment).filter(
        FileAttachment.task_id == task_id
    ).order_by(FileAttachment.uploaded_at.desc()).all()


def update_attachment(db: Session, attachment_id, **changes) -> FileAttachment:
    attachment = get_attachment(db, attachment_id)
    if "project_id" in changes:
        require_reference(db, Project, changes["project_id"], "project_id")
    if "task_id" in changes:
        require_reference(db, Task, changes["task_id"], "task_id")
    apply_changes(attachment, changes, immutable={"user_id"})
    return save(db, attachment)


def delete_attachment(db: Session, attachment_id):
    attachment = get_attachment(db, attachment_id)
    with atomic(db):
        db.delete(attachment)
    logger.info(f"Deleted attachment {attachment_id}")
