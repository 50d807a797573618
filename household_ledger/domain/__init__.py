"""Domain package for household bookkeeping rules and core models."""

from .errors import (
    HouseholdError,
    IntegrityConflictError,
    NotFoundError,
    ValidationFailureError,
)
from .models import (
    Category,
    CategoryPurpose,
    FailureReason,
    Person,
    Transaction,
    TransactionFilter,
    TransactionType,
    TransactionValidation,
    ValidationIssue,
)
from .policies import labels_match, normalize_label
from .services import (
    aggregate_by_category,
    aggregate_by_person,
    can_delete_category,
    compute_transaction_stats,
    filter_transactions,
    summarize_person_deletion,
    validate_transaction,
)

__all__ = [
    "HouseholdError",
    "IntegrityConflictError",
    "NotFoundError",
    "ValidationFailureError",
    "Category",
    "CategoryPurpose",
    "FailureReason",
    "Person",
    "Transaction",
    "TransactionFilter",
    "TransactionType",
    "TransactionValidation",
    "ValidationIssue",
    "labels_match",
    "normalize_label",
    "aggregate_by_category",
    "aggregate_by_person",
    "can_delete_category",
    "compute_transaction_stats",
    "filter_transactions",
    "summarize_person_deletion",
    "validate_transaction",
]
