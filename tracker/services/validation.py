"""
Validation explicite des entités avant chaque écriture.

Chaque modèle est associé à un schéma pydantic dont les champs portent les
mêmes noms que les colonnes. validate() lit l'entité via from_attributes et
renvoie la liste des violations (champ, règle, message) au lieu de lever.
"""

from typing import List
from pydantic import BaseModel, ValidationError

from tracker.core.errors import ValidationFailed
from tracker.models.category import Category
from tracker.models.file_attachment import FileAttachment
from tracker.models.goal import Goal
from tracker.models.project import Project
from tracker.models.tag import Tag
from tracker.models.task import Task
from tracker.models.time_session import TimeSession
from tracker.models.user import User
from tracker.models.user_preference import UserPreference
from tracker.schemas.category import CategorySchema
from tracker.schemas.file_attachment import FileAttachmentSchema
from tracker.schemas.goal import GoalSchema
from tracker.schemas.project import ProjectSchema
from tracker.schemas.tag import TagSchema
from tracker.schemas.task import TaskSchema
from tracker.schemas.time_session import TimeSessionSchema
from tracker.schemas.user import UserSchema
from tracker.schemas.user_preference import UserPreferenceSchema


class Violation(BaseModel):
    field: str
    rule: str
    message: str


SCHEMAS = {
    User: UserSchema,
    Project: ProjectSchema,
    Task: TaskSchema,
    TimeSession: TimeSessionSchema,
    Tag: TagSchema,
    Category: CategorySchema,
    Goal: GoalSchema,
    FileAttachment: FileAttachmentSchema,
    UserPreference: UserPreferenceSchema,
}

# types d'erreur pydantic -> règle
RULES = {
    "missing": "required",
    "string_too_long": "max_length",
    "not_blank": "not_blank",
    "enum": "enum",
    "value_error": "format",
}


def _to_violation(error: dict) -> Violation:
    field = ".".join(str(part) for part in error["loc"]) or "__root__"
    if error["type"] != "missing" and error.get("input") is None:
        return Violation(field=field, rule="required", message="is required")
    return Violation(
        field=field,
        rule=RULES.get(error["type"], error["type"]),
        message=error["msg"],
    )


def validate(entity) -> List[Violation]:
    schema = SCHEMAS.get(type(entity))
    if schema is None:
        raise TypeError(f"No validation schema for {type(entity).__name__}")

    try:
        schema.model_validate(entity)
    except ValidationError as e:
        return [_to_violation(error) for error in e.errors()]
    return []


def ensure_valid(entity):
    violations = validate(entity)
    if violations:
        raise ValidationFailed(violations)
    return entity
