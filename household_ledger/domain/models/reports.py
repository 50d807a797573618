"""Domain models for aggregate reports and summaries."""

from dataclasses import dataclass
from decimal import Decimal

from household_ledger.domain.models.entities import (
    Category,
    CategoryPurpose,
    Person,
    Transaction,
)


@dataclass(frozen=True)
class GrandTotal:
    """Totals across every group of a report.

    Attributes:
        total_income: Sum of group income totals.
        total_expense: Sum of group expense totals.
        balance: Sum of group balances.
    """

    total_income: Decimal
    total_expense: Decimal
    balance: Decimal


@dataclass(frozen=True)
class PersonTotals:
    """Income, expense and balance for one person."""

    person_id: int
    name: str
    total_income: Decimal
    total_expense: Decimal
    balance: Decimal


@dataclass(frozen=True)
class CategoryTotals:
    """Income, expense and balance for one category."""

    category_id: int
    description: str
    purpose: CategoryPurpose
    total_income: Decimal
    total_expense: Decimal
    balance: Decimal


@dataclass(frozen=True)
class PersonTotalsReport:
    rows: list[PersonTotals]
    grand_total: GrandTotal


@dataclass(frozen=True)
class CategoryTotalsReport:
    rows: list[CategoryTotals]
    grand_total: GrandTotal


@dataclass(frozen=True)
class TransactionStats:
    """Global transaction statistics.

    Attributes:
        total_transactions: Number of transactions.
        total_income: Sum of income amounts.
        total_expense: Sum of expense amounts.
        balance: Income minus expense.
        latest: Most recently created transaction, if any.
    """

    total_transactions: int
    total_income: Decimal
    total_expense: Decimal
    balance: Decimal
    latest: Transaction | None = None


@dataclass(frozen=True)
class CategoryDeletionCheck:
    """Answer of the category deletion guard."""

    category_id: int
    allowed: bool
    transaction_count: int
    reason: str


@dataclass(frozen=True)
class PersonDeletionSummary:
    """Outcome of removing a person and its transactions."""

    person_id: int
    name: str
    removed_transactions: int
    message: str


@dataclass(frozen=True)
class PersonOverview:
    """Person with the number of transactions it owns."""

    person: Person
    transaction_count: int


@dataclass(frozen=True)
class CategoryOverview:
    """Category with the number of transactions referencing it."""

    category: Category
    transaction_count: int


@dataclass(frozen=True)
class TransactionDetails:
    """Transaction with the display names of its owners."""

    transaction: Transaction
    person_name: str
    category_description: str


__all__ = [
    "GrandTotal",
    "PersonTotals",
    "CategoryTotals",
    "PersonTotalsReport",
    "CategoryTotalsReport",
    "TransactionStats",
    "CategoryDeletionCheck",
    "PersonDeletionSummary",
    "PersonOverview",
    "CategoryOverview",
    "TransactionDetails",
]
