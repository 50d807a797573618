"""Exceptions raised by household use cases.

Domain services return typed results; use cases turn rejected operations
into these exceptions and leave the translation to transport-level
responses to the adapters.
"""

from collections.abc import Iterable

from household_ledger.domain.models.validation import ValidationIssue


class HouseholdError(Exception):
    """Base class for household bookkeeping errors."""


class NotFoundError(HouseholdError):
    """Raised when a referenced record does not exist."""

    def __init__(self, entity: str, entity_id: int) -> None:
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} com ID {entity_id} não foi encontrada.")


class ValidationFailureError(HouseholdError):
    """Raised when one or more business rules reject an operation."""

    def __init__(self, issues: Iterable[ValidationIssue]) -> None:
        self.issues = tuple(issues)
        super().__init__("; ".join(issue.message for issue in self.issues))

    @property
    def messages(self) -> list[str]:
        return [issue.message for issue in self.issues]


class IntegrityConflictError(ValidationFailureError):
    """Raised when a storage constraint rejects a write.

    This covers races where an advisory check passed but the database
    uniqueness or foreign key constraints did not.
    """


__all__ = [
    "HouseholdError",
    "NotFoundError",
    "ValidationFailureError",
    "IntegrityConflictError",
]
