"""Domain services package."""

from .aggregation import (
    aggregate_by_category,
    aggregate_by_person,
    compute_transaction_stats,
)
from .deletion import can_delete_category, summarize_person_deletion
from .filtering import clamp_recent_limit, filter_transactions
from .validation import (
    invalid_type_issue,
    validate_category_fields,
    validate_person_fields,
    validate_transaction,
    validate_transaction_fields,
)

__all__ = [
    "aggregate_by_category",
    "aggregate_by_person",
    "compute_transaction_stats",
    "can_delete_category",
    "summarize_person_deletion",
    "clamp_recent_limit",
    "filter_transactions",
    "invalid_type_issue",
    "validate_category_fields",
    "validate_person_fields",
    "validate_transaction",
    "validate_transaction_fields",
]
