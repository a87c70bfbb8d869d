"""Helpers communs aux services : lecture, écriture validée, transactions"""

import logging
from contextlib import contextmanager
from typing import Iterable

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from tracker.core.errors import (
    NotFoundError,
    ReferentialIntegrityError,
    UniquenessConflict,
    ValidationFailed,
)
from tracker.services.validation import Violation, ensure_valid

logger = logging.getLogger(__name__)

# jamais modifiables via un update
ALWAYS_IMMUTABLE = {"id", "created_at", "updated_at", "uploaded_at"}


def get_or_raise(db: Session, model, entity_id):
    entity = db.get(model, entity_id)
    if entity is None:
        raise NotFoundError(model.__name__, entity_id)
    return entity


def require_reference(db: Session, model, entity_id, field: str):
    """Vérifie qu'une association pointe vers une ligne existante"""
    if entity_id is None:
        return
    if db.get(model, entity_id) is None:
        raise ReferentialIntegrityError(f"{field} references missing {model.__name__} {entity_id}")


@contextmanager
def atomic(db: Session):
    """Commit en sortie, rollback si une erreur remonte"""
    try:
        yield db
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise _translate_integrity_error(e) from e
    except Exception:
        db.rollback()
        raise


def _translate_integrity_error(error: IntegrityError):
    message = str(error.orig)
    if "unique" in message.lower():
        return UniquenessConflict(_unique_field(message))
    return ReferentialIntegrityError(message)


def _unique_field(message: str) -> str:
    # sqlite: "UNIQUE constraint failed: users.email"
    # postgres: 'duplicate key value violates unique constraint "ix_users_email"'
    for field in ("username", "email"):
        if field in message:
            return field
    return "unknown"


def save(db: Session, entity):
    """Valide puis écrit l'entité dans sa propre transaction"""
    try:
        ensure_valid(entity)
    except ValidationFailed as e:
        # annule les modifications en attente sur la session
        db.rollback()
        logger.warning(f"Rejected write on {type(entity).__name__}: {e}")
        raise
    with atomic(db):
        db.add(entity)
    db.refresh(entity)
    return entity


def check_fields(model, fields: dict, immutable: Iterable[str] = ()):
    """Refuse les champs verrouillés, inconnus, ou NULL sur une colonne NOT NULL"""
    locked = ALWAYS_IMMUTABLE | set(immutable)
    columns = model.__table__.columns
    violations = []

    for field, value in fields.items():
        if field in locked:
            violations.append(Violation(field=field, rule="immutable", message="cannot be set by the caller"))
        elif field not in columns:
            violations.append(Violation(field=field, rule="unknown_field", message="is not a field of this entity"))
        elif value is None and not columns[field].nullable:
            violations.append(Violation(field=field, rule="required", message="is required"))

    if violations:
        logger.warning(f"Rejected fields on {model.__name__}: {[v.field for v in violations]}")
        raise ValidationFailed(violations)
    return fields


def apply_changes(entity, changes: dict, immutable: Iterable[str] = ()):
    """Affecte les champs modifiés (équivalent des setters)"""
    check_fields(type(entity), changes, immutable)

    for field, value in changes.items():
        setattr(entity, field, value)
    return entity
