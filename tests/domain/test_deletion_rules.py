"""Tests for the deletion guards."""

import pytest

from household_ledger.domain.models import Category, CategoryPurpose, Person
from household_ledger.domain.services.deletion import (
    can_delete_category,
    summarize_person_deletion,
)

CATEGORY = Category(id=4, description="Lazer", purpose=CategoryPurpose.EXPENSE)


def test_unreferenced_category_can_be_deleted():
    check = can_delete_category(CATEGORY, 0)

    assert check.allowed is True
    assert check.transaction_count == 0
    assert check.reason == "Categoria pode ser removida"


def test_referenced_category_cannot_be_deleted():
    check = can_delete_category(CATEGORY, 3)

    assert check.allowed is False
    assert check.category_id == 4
    assert "3 transação(ões)" in check.reason


def test_negative_count_is_rejected():
    with pytest.raises(ValueError):
        can_delete_category(CATEGORY, -1)


def test_person_deletion_summary_reports_cascade():
    summary = summarize_person_deletion(Person(1, "Ana", 30), 5)

    assert summary.removed_transactions == 5
    assert summary.message == "Pessoa 'Ana' foi removida com sucesso."
