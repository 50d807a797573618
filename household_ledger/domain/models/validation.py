"""Validation result models."""

from dataclasses import dataclass
from enum import Enum


class FailureReason(Enum):
    """Business rule violations reported to callers."""

    PERSON_NOT_FOUND = "PersonNotFound"
    CATEGORY_NOT_FOUND = "CategoryNotFound"
    MINOR_CANNOT_RECEIVE_INCOME = "MinorCannotReceiveIncome"
    CATEGORY_TYPE_MISMATCH = "CategoryTypeMismatch"
    INVALID_TYPE = "InvalidType"
    INVALID_PURPOSE = "InvalidPurpose"
    INVALID_NAME = "InvalidName"
    INVALID_AGE = "InvalidAge"
    INVALID_DESCRIPTION = "InvalidDescription"
    INVALID_AMOUNT = "InvalidAmount"
    DUPLICATE_NAME = "DuplicateName"
    DUPLICATE_DESCRIPTION = "DuplicateDescription"
    CATEGORY_IN_USE = "CategoryInUse"
    INTEGRITY_CONFLICT = "IntegrityConflict"


@dataclass(frozen=True)
class ValidationIssue:
    """A single rule violation with a human-readable message."""

    reason: FailureReason
    message: str


@dataclass(frozen=True)
class TransactionValidation:
    """Outcome of validating a proposed transaction.

    Attributes:
        issues: Violations in rule order; empty when the transaction is legal.
    """

    issues: tuple[ValidationIssue, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.issues

    @property
    def reasons(self) -> list[FailureReason]:
        return [issue.reason for issue in self.issues]

    @property
    def messages(self) -> list[str]:
        return [issue.message for issue in self.issues]


__all__ = ["FailureReason", "ValidationIssue", "TransactionValidation"]
