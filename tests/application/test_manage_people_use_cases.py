"""Tests for the people use cases."""

from datetime import datetime
from decimal import Decimal

import pytest

from household_ledger.application.use_cases.manage_people import (
    CreatePersonUseCase,
    DeletePersonUseCase,
    GetPersonUseCase,
    ListPeopleUseCase,
    UpdatePersonUseCase,
)
from household_ledger.domain.errors import NotFoundError, ValidationFailureError
from household_ledger.domain.models import FailureReason, TransactionType


def test_create_person_trims_name(repository, fake_logger):
    person = CreatePersonUseCase(repository, logger=fake_logger).execute(
        "  Ana  ",
        30,
    )

    assert person.name == "Ana"
    assert repository.find_person_by_id(person.id) == person
    fake_logger.info.assert_called_once()


def test_create_person_rejects_duplicate_name_ignoring_case(
    repository,
    fake_logger,
):
    use_case = CreatePersonUseCase(repository, logger=fake_logger)
    use_case.execute("Ana", 30)

    with pytest.raises(ValidationFailureError) as excinfo:
        use_case.execute("ANA", 25)

    assert [i.reason for i in excinfo.value.issues] == [
        FailureReason.DUPLICATE_NAME
    ]
    assert len(repository.people) == 1
    fake_logger.warning.assert_called_once()


def test_create_person_reports_every_invalid_field(repository, fake_logger):
    with pytest.raises(ValidationFailureError) as excinfo:
        CreatePersonUseCase(repository, logger=fake_logger).execute("", 151)

    assert [i.reason for i in excinfo.value.issues] == [
        FailureReason.INVALID_NAME,
        FailureReason.INVALID_AGE,
    ]


def test_list_people_carries_transaction_counts(household, fake_logger):
    household.add_transaction(
        "Mercado",
        Decimal("10.00"),
        TransactionType.EXPENSE,
        datetime(2024, 1, 1),
        1,
        1,
    )

    overviews = ListPeopleUseCase(household, logger=fake_logger).execute()

    counts = {item.person.name: item.transaction_count for item in overviews}
    assert counts == {"Ana": 1, "Bruno": 0}


def test_get_person_missing_raises(repository, fake_logger):
    with pytest.raises(NotFoundError) as excinfo:
        GetPersonUseCase(repository, logger=fake_logger).execute(42)

    assert str(excinfo.value) == "Pessoa com ID 42 não foi encontrada."


def test_update_person_allows_keeping_own_name(household, fake_logger):
    overview = UpdatePersonUseCase(household, logger=fake_logger).execute(
        1,
        "ana",
        31,
    )

    assert overview.person.name == "ana"
    assert overview.person.age == 31


def test_update_person_rejects_name_of_another(household, fake_logger):
    with pytest.raises(ValidationFailureError) as excinfo:
        UpdatePersonUseCase(household, logger=fake_logger).execute(
            1,
            "Bruno",
            31,
        )

    assert excinfo.value.issues[0].reason is FailureReason.DUPLICATE_NAME


def test_update_missing_person_raises(repository, fake_logger):
    with pytest.raises(NotFoundError):
        UpdatePersonUseCase(repository, logger=fake_logger).execute(9, "X", 1)


def test_delete_person_cascades_transactions(household, fake_logger, clock):
    for amount in ("10.00", "20.00"):
        household.add_transaction(
            "Mercado",
            Decimal(amount),
            TransactionType.EXPENSE,
            clock(),
            1,
            1,
        )
    household.add_transaction(
        "Lanche",
        Decimal("5.00"),
        TransactionType.EXPENSE,
        clock(),
        2,
        1,
    )

    summary = DeletePersonUseCase(household, logger=fake_logger).execute(1)

    assert summary.removed_transactions == 2
    assert summary.message == "Pessoa 'Ana' foi removida com sucesso."
    assert household.find_person_by_id(1) is None
    assert [tx.person_id for tx in household.list_transactions()] == [2]


def test_delete_missing_person_raises(repository, fake_logger):
    with pytest.raises(NotFoundError):
        DeletePersonUseCase(repository, logger=fake_logger).execute(1)
