"""Tests for the category use cases."""

from datetime import datetime
from decimal import Decimal

import pytest

from household_ledger.application.use_cases.manage_categories import (
    CheckCategoryDeletionUseCase,
    CreateCategoryUseCase,
    DeleteCategoryUseCase,
    GetCategoryUseCase,
    ListCategoriesForTypeUseCase,
    ListCategoriesUseCase,
)
from household_ledger.domain.errors import NotFoundError, ValidationFailureError
from household_ledger.domain.models import (
    CategoryPurpose,
    FailureReason,
    TransactionType,
)
from household_ledger.domain.services.validation import (
    INVALID_PURPOSE_MESSAGE,
    INVALID_TYPE_MESSAGE,
)


def test_create_category_accepts_code(repository, fake_logger):
    category = CreateCategoryUseCase(repository, logger=fake_logger).execute(
        " Viagem ",
        3,
    )

    assert category.description == "Viagem"
    assert category.purpose is CategoryPurpose.BOTH


def test_create_category_rejects_unknown_purpose(repository, fake_logger):
    with pytest.raises(ValidationFailureError) as excinfo:
        CreateCategoryUseCase(repository, logger=fake_logger).execute(
            "Viagem",
            7,
        )

    assert excinfo.value.messages == [INVALID_PURPOSE_MESSAGE]
    assert repository.categories == {}


def test_create_category_rejects_duplicate_description(household, fake_logger):
    with pytest.raises(ValidationFailureError) as excinfo:
        CreateCategoryUseCase(household, logger=fake_logger).execute(
            "outros",
            1,
        )

    assert excinfo.value.issues[0].reason is (
        FailureReason.DUPLICATE_DESCRIPTION
    )


def test_list_categories_ordered_by_description(household, fake_logger):
    overviews = ListCategoriesUseCase(household, logger=fake_logger).execute()

    assert [item.category.description for item in overviews] == [
        "Alimentação",
        "Outros",
        "Salário",
    ]


def test_categories_for_income(household, fake_logger):
    overviews = ListCategoriesForTypeUseCase(
        household,
        logger=fake_logger,
    ).execute(2)

    assert [item.category.description for item in overviews] == [
        "Outros",
        "Salário",
    ]


def test_categories_for_unknown_type(household, fake_logger):
    with pytest.raises(ValidationFailureError) as excinfo:
        ListCategoriesForTypeUseCase(household, logger=fake_logger).execute(5)

    assert excinfo.value.messages == [INVALID_TYPE_MESSAGE]


def test_get_missing_category(repository, fake_logger):
    with pytest.raises(NotFoundError):
        GetCategoryUseCase(repository, logger=fake_logger).execute(3)


def test_deletion_check_counts_references(household, fake_logger):
    household.add_transaction(
        "Mercado",
        Decimal("10.00"),
        TransactionType.EXPENSE,
        datetime(2024, 1, 1),
        1,
        1,
    )
    use_case = CheckCategoryDeletionUseCase(household, logger=fake_logger)

    referenced = use_case.execute(1)
    free = use_case.execute(2)

    assert referenced.allowed is False
    assert referenced.transaction_count == 1
    assert free.allowed is True


def test_delete_category_refuses_when_referenced(household, fake_logger):
    household.add_transaction(
        "Mercado",
        Decimal("10.00"),
        TransactionType.EXPENSE,
        datetime(2024, 1, 1),
        1,
        1,
    )

    with pytest.raises(ValidationFailureError) as excinfo:
        DeleteCategoryUseCase(household, logger=fake_logger).execute(1)

    assert excinfo.value.issues[0].reason is FailureReason.CATEGORY_IN_USE
    assert household.find_category_by_id(1) is not None


def test_delete_free_category(household, fake_logger):
    check = DeleteCategoryUseCase(household, logger=fake_logger).execute(2)

    assert check.allowed is True
    assert household.find_category_by_id(2) is None
