"""Aggregation of signed transaction totals per person and per category."""

from collections.abc import Callable, Iterable
from decimal import Decimal

from household_ledger.domain.models.entities import (
    Category,
    Person,
    Transaction,
    TransactionType,
)
from household_ledger.domain.models.reports import (
    CategoryTotals,
    CategoryTotalsReport,
    GrandTotal,
    PersonTotals,
    PersonTotalsReport,
    TransactionStats,
)
from household_ledger.utils.decimal_utils import ZERO, quantize_money


def aggregate_by_person(
    people: Iterable[Person],
    transactions: Iterable[Transaction],
) -> PersonTotalsReport:
    """Compute income, expense and balance for every person.

    People without transactions get an all-zero row. Rows are ordered by
    name (plain string ordering, so case-sensitive), then by id.

    Args:
        people: Every person to report on.
        transactions: Transactions to roll up.

    Returns:
        PersonTotalsReport: One row per person plus the grand total.
    """
    totals = _sum_by_key(transactions, lambda tx: tx.person_id)
    rows = []
    for person in sorted(people, key=lambda item: (item.name, item.id)):
        income, expense = totals.get(person.id, (ZERO, ZERO))
        rows.append(
            PersonTotals(
                person_id=person.id,
                name=person.name,
                total_income=income,
                total_expense=expense,
                balance=income - expense,
            )
        )
    return PersonTotalsReport(rows=rows, grand_total=_grand_total(rows))


def aggregate_by_category(
    categories: Iterable[Category],
    transactions: Iterable[Transaction],
) -> CategoryTotalsReport:
    """Compute income, expense and balance for every category.

    Rows are ordered by description, then by id.

    Args:
        categories: Every category to report on.
        transactions: Transactions to roll up.

    Returns:
        CategoryTotalsReport: One row per category plus the grand total.
    """
    totals = _sum_by_key(transactions, lambda tx: tx.category_id)
    rows = []
    for category in sorted(
        categories,
        key=lambda item: (item.description, item.id),
    ):
        income, expense = totals.get(category.id, (ZERO, ZERO))
        rows.append(
            CategoryTotals(
                category_id=category.id,
                description=category.description,
                purpose=category.purpose,
                total_income=income,
                total_expense=expense,
                balance=income - expense,
            )
        )
    return CategoryTotalsReport(rows=rows, grand_total=_grand_total(rows))


def compute_transaction_stats(
    transactions: Iterable[Transaction],
) -> TransactionStats:
    """Compute global counts and totals over a transaction set."""
    items = list(transactions)
    income = ZERO
    expense = ZERO
    for transaction in items:
        if transaction.type is TransactionType.INCOME:
            income += quantize_money(transaction.amount)
        else:
            expense += quantize_money(transaction.amount)
    latest = max(
        items,
        key=lambda tx: (tx.created_at, tx.id),
        default=None,
    )
    return TransactionStats(
        total_transactions=len(items),
        total_income=income,
        total_expense=expense,
        balance=income - expense,
        latest=latest,
    )


def _sum_by_key(
    transactions: Iterable[Transaction],
    key: Callable[[Transaction], int],
) -> dict[int, tuple[Decimal, Decimal]]:
    totals: dict[int, tuple[Decimal, Decimal]] = {}
    for transaction in transactions:
        group = key(transaction)
        income, expense = totals.get(group, (ZERO, ZERO))
        amount = quantize_money(transaction.amount)
        if transaction.type is TransactionType.INCOME:
            income += amount
        else:
            expense += amount
        totals[group] = (income, expense)
    return totals


def _grand_total(rows: list[PersonTotals] | list[CategoryTotals]) -> GrandTotal:
    # Sums of the group figures, so both views agree by construction.
    return GrandTotal(
        total_income=sum((row.total_income for row in rows), start=ZERO),
        total_expense=sum((row.total_expense for row in rows), start=ZERO),
        balance=sum((row.balance for row in rows), start=ZERO),
    )


__all__ = [
    "aggregate_by_person",
    "aggregate_by_category",
    "compute_transaction_stats",
]
