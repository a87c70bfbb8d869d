"""Erreurs levées par la couche services"""


class TrackerError(Exception):
    pass


class ValidationFailed(TrackerError):
    def __init__(self, violations):
        self.violations = list(violations)
        summary = ", ".join(f"{v.field}: {v.message}" for v in self.violations)
        super().__init__(f"Validation failed ({summary})")


class UniquenessConflict(TrackerError):
    def __init__(self, field: str, value=None):
        self.field = field
        self.value = value
        if value is None:
            super().__init__(f"{field} already exists")
        else:
            super().__init__(f"{field} '{value}' already exists")


class ReferentialIntegrityError(TrackerError):
    pass


class NotFoundError(TrackerError):
    def __init__(self, entity: str, entity_id):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} {entity_id} not found")
