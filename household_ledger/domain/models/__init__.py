"""Domain models package."""

from .entities import (
    Category,
    CategoryPurpose,
    Person,
    Transaction,
    TransactionType,
)
from .filters import TransactionFilter
from .reports import (
    CategoryDeletionCheck,
    CategoryOverview,
    CategoryTotals,
    CategoryTotalsReport,
    GrandTotal,
    PersonDeletionSummary,
    PersonOverview,
    PersonTotals,
    PersonTotalsReport,
    TransactionDetails,
    TransactionStats,
)
from .validation import FailureReason, TransactionValidation, ValidationIssue

__all__ = [
    "Category",
    "CategoryPurpose",
    "Person",
    "Transaction",
    "TransactionType",
    "TransactionFilter",
    "CategoryDeletionCheck",
    "CategoryOverview",
    "CategoryTotals",
    "CategoryTotalsReport",
    "GrandTotal",
    "PersonDeletionSummary",
    "PersonOverview",
    "PersonTotals",
    "PersonTotalsReport",
    "TransactionDetails",
    "TransactionStats",
    "FailureReason",
    "TransactionValidation",
    "ValidationIssue",
]
