"""Tests for per-person and per-category aggregation."""

from datetime import datetime
from decimal import Decimal

from household_ledger.domain.models import (
    Category,
    CategoryPurpose,
    Person,
    TransactionType,
)
from household_ledger.domain.services.aggregation import (
    aggregate_by_category,
    aggregate_by_person,
    compute_transaction_stats,
)


def test_aggregate_by_person_includes_people_without_transactions(
    transaction_factory,
):
    people = [Person(2, "Bruno", 12), Person(1, "Ana", 30)]
    transactions = [
        transaction_factory(1, "1000.00", TransactionType.INCOME, person_id=1),
        transaction_factory(2, "250.50", TransactionType.EXPENSE, person_id=1),
    ]

    report = aggregate_by_person(people, transactions)

    assert [row.name for row in report.rows] == ["Ana", "Bruno"]
    ana, bruno = report.rows
    assert ana.total_income == Decimal("1000.00")
    assert ana.total_expense == Decimal("250.50")
    assert ana.balance == Decimal("749.50")
    assert bruno.total_income == Decimal("0")
    assert bruno.balance == Decimal("0")


def test_grand_total_is_sum_of_balances(transaction_factory):
    people = [Person(1, "Ana", 30), Person(2, "Carla", 40)]
    transactions = [
        transaction_factory(1, "100.00", TransactionType.INCOME, person_id=1),
        transaction_factory(2, "30.00", TransactionType.EXPENSE, person_id=2),
        transaction_factory(3, "20.00", TransactionType.EXPENSE, person_id=1),
    ]

    report = aggregate_by_person(people, transactions)

    assert report.grand_total.total_income == Decimal("100.00")
    assert report.grand_total.total_expense == Decimal("50.00")
    assert report.grand_total.balance == Decimal("50.00")
    assert report.grand_total.balance == sum(row.balance for row in report.rows)


def test_empty_report_has_zero_totals():
    report = aggregate_by_person([], [])

    assert report.rows == []
    assert report.grand_total.total_income == Decimal("0")
    assert report.grand_total.balance == Decimal("0")


def test_person_rows_order_by_name_then_id():
    people = [Person(3, "ana", 30), Person(2, "Ana", 30), Person(1, "Ana", 30)]

    report = aggregate_by_person(people, [])

    assert [row.person_id for row in report.rows] == [1, 2, 3]


def test_aggregate_by_category_groups_by_category(transaction_factory):
    categories = [
        Category(2, "Salário", CategoryPurpose.INCOME),
        Category(1, "Alimentação", CategoryPurpose.EXPENSE),
        Category(3, "Outros", CategoryPurpose.BOTH),
    ]
    transactions = [
        transaction_factory(1, "80.00", TransactionType.EXPENSE, category_id=1),
        transaction_factory(2, "5000.00", TransactionType.INCOME, category_id=2),
        transaction_factory(3, "10.00", TransactionType.INCOME, category_id=3),
        transaction_factory(4, "15.00", TransactionType.EXPENSE, category_id=3),
    ]

    report = aggregate_by_category(categories, transactions)

    assert [row.description for row in report.rows] == [
        "Alimentação",
        "Outros",
        "Salário",
    ]
    outros = report.rows[1]
    assert outros.purpose is CategoryPurpose.BOTH
    assert outros.balance == Decimal("-5.00")
    assert report.grand_total.balance == Decimal("4915.00")


def test_person_and_category_views_agree(transaction_factory):
    people = [Person(1, "Ana", 30), Person(2, "Bruno", 12)]
    categories = [
        Category(1, "Alimentação", CategoryPurpose.EXPENSE),
        Category(2, "Salário", CategoryPurpose.INCOME),
    ]
    transactions = [
        transaction_factory(1, "12.34", TransactionType.EXPENSE, 1, 1),
        transaction_factory(2, "99.99", TransactionType.INCOME, 1, 2),
        transaction_factory(3, "7.00", TransactionType.EXPENSE, 2, 1),
    ]

    by_person = aggregate_by_person(people, transactions)
    by_category = aggregate_by_category(categories, transactions)

    assert by_person.grand_total == by_category.grand_total


def test_transaction_stats_picks_latest(transaction_factory):
    same_time = datetime(2024, 5, 1, 12, 0)
    transactions = [
        transaction_factory(1, "10.00", TransactionType.INCOME),
        transaction_factory(3, "5.00", TransactionType.EXPENSE, created_at=same_time),
        transaction_factory(2, "1.00", TransactionType.EXPENSE, created_at=same_time),
    ]

    stats = compute_transaction_stats(transactions)

    assert stats.total_transactions == 3
    assert stats.total_income == Decimal("10.00")
    assert stats.total_expense == Decimal("6.00")
    assert stats.balance == Decimal("4.00")
    assert stats.latest.id == 3


def test_transaction_stats_empty():
    stats = compute_transaction_stats([])

    assert stats.total_transactions == 0
    assert stats.latest is None
    assert stats.balance == Decimal("0")
