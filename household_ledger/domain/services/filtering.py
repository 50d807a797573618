"""Transaction listing helpers."""

from collections.abc import Iterable

from household_ledger.domain.constants import (
    DEFAULT_RECENT_LIMIT,
    MAX_RECENT_LIMIT,
)
from household_ledger.domain.models.entities import Transaction
from household_ledger.domain.models.filters import TransactionFilter


def filter_transactions(
    transactions: Iterable[Transaction],
    criteria: TransactionFilter | None = None,
) -> list[Transaction]:
    """Return matching transactions, newest first.

    Args:
        transactions: Candidate transactions.
        criteria: Optional filter; None keeps everything.

    Returns:
        list[Transaction]: Matches ordered by created_at then id, descending.
    """
    criteria = criteria or TransactionFilter()
    matches = [tx for tx in transactions if criteria.matches(tx)]
    return sorted(matches, key=newest_first_key, reverse=True)


def newest_first_key(transaction: Transaction):
    return (transaction.created_at, transaction.id)


def clamp_recent_limit(limit: int | None) -> int:
    """Return a usable limit for recent-transaction listings."""
    if limit is None or limit <= 0 or limit > MAX_RECENT_LIMIT:
        return DEFAULT_RECENT_LIMIT
    return limit


__all__ = ["filter_transactions", "newest_first_key", "clamp_recent_limit"]
