"""Shared fixtures: an in-memory repository honoring the storage rules."""

from dataclasses import replace
from datetime import datetime, timedelta
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from household_ledger.domain.models import (
    Category,
    CategoryPurpose,
    Person,
    Transaction,
    TransactionFilter,
    TransactionType,
)
from household_ledger.domain.policies.naming import labels_match
from household_ledger.domain.services.filtering import filter_transactions


class InMemoryHouseholdRepository:
    """Dictionary-backed repository used by use case and API tests."""

    def __init__(self) -> None:
        self.people: dict[int, Person] = {}
        self.categories: dict[int, Category] = {}
        self.transactions: dict[int, Transaction] = {}
        self._next_id = {"person": 1, "category": 1, "transaction": 1}

    def _allocate(self, kind: str) -> int:
        value = self._next_id[kind]
        self._next_id[kind] = value + 1
        return value

    def find_person_by_id(self, person_id):
        return self.people.get(person_id)

    def find_category_by_id(self, category_id):
        return self.categories.get(category_id)

    def find_transaction_by_id(self, transaction_id):
        return self.transactions.get(transaction_id)

    def list_people(self):
        return list(self.people.values())

    def list_categories(self):
        return list(self.categories.values())

    def list_transactions(self, criteria=None, limit=None):
        matches = filter_transactions(
            self.transactions.values(),
            criteria or TransactionFilter(),
        )
        return matches[:limit] if limit is not None else matches

    def count_transactions_referencing_category(self, category_id):
        return sum(
            1 for tx in self.transactions.values()
            if tx.category_id == category_id
        )

    def count_transactions_for_person(self, person_id):
        return sum(
            1 for tx in self.transactions.values() if tx.person_id == person_id
        )

    def count_transactions_by_person(self):
        counts: dict[int, int] = {}
        for tx in self.transactions.values():
            counts[tx.person_id] = counts.get(tx.person_id, 0) + 1
        return counts

    def count_transactions_by_category(self):
        counts: dict[int, int] = {}
        for tx in self.transactions.values():
            counts[tx.category_id] = counts.get(tx.category_id, 0) + 1
        return counts

    def name_exists(self, name, excluding_person_id=None):
        return any(
            labels_match(person.name, name)
            for person in self.people.values()
            if person.id != excluding_person_id
        )

    def description_exists(self, description):
        return any(
            labels_match(category.description, description)
            for category in self.categories.values()
        )

    def add_person(self, name, age):
        person = Person(id=self._allocate("person"), name=name, age=age)
        self.people[person.id] = person
        return person

    def update_person(self, person_id, name, age):
        person = Person(id=person_id, name=name, age=age)
        self.people[person_id] = person
        return person

    def delete_person(self, person_id):
        del self.people[person_id]
        self.transactions = {
            key: tx
            for key, tx in self.transactions.items()
            if tx.person_id != person_id
        }

    def add_category(self, description, purpose):
        category = Category(
            id=self._allocate("category"),
            description=description,
            purpose=purpose,
        )
        self.categories[category.id] = category
        return category

    def delete_category(self, category_id):
        del self.categories[category_id]

    def add_transaction(
        self,
        description,
        amount,
        transaction_type,
        created_at,
        person_id,
        category_id,
    ):
        transaction = Transaction(
            id=self._allocate("transaction"),
            description=description,
            amount=amount,
            type=transaction_type,
            created_at=created_at,
            person_id=person_id,
            category_id=category_id,
        )
        self.transactions[transaction.id] = transaction
        return transaction

    def update_transaction(
        self,
        transaction_id,
        description,
        amount,
        transaction_type,
        person_id,
        category_id,
    ):
        transaction = replace(
            self.transactions[transaction_id],
            description=description,
            amount=amount,
            type=transaction_type,
            person_id=person_id,
            category_id=category_id,
        )
        self.transactions[transaction_id] = transaction
        return transaction

    def delete_transaction(self, transaction_id):
        del self.transactions[transaction_id]


class SteppingClock:
    """Clock returning strictly increasing timestamps."""

    def __init__(self, start: datetime | None = None) -> None:
        self._current = start or datetime(2024, 1, 1, 9, 0, 0)

    def __call__(self) -> datetime:
        value = self._current
        self._current = value + timedelta(minutes=1)
        return value


@pytest.fixture
def repository() -> InMemoryHouseholdRepository:
    return InMemoryHouseholdRepository()


@pytest.fixture
def fake_logger() -> MagicMock:
    return MagicMock()


@pytest.fixture
def clock() -> SteppingClock:
    return SteppingClock()


@pytest.fixture
def household(repository):
    """Repository preloaded with an adult, a minor and three categories."""
    repository.add_person("Ana", 30)
    repository.add_person("Bruno", 12)
    repository.add_category("Alimentação", CategoryPurpose.EXPENSE)
    repository.add_category("Salário", CategoryPurpose.INCOME)
    repository.add_category("Outros", CategoryPurpose.BOTH)
    return repository


def make_transaction(
    transaction_id: int,
    amount: str,
    transaction_type: TransactionType,
    person_id: int = 1,
    category_id: int = 1,
    created_at: datetime | None = None,
) -> Transaction:
    return Transaction(
        id=transaction_id,
        description=f"tx-{transaction_id}",
        amount=Decimal(amount),
        type=transaction_type,
        created_at=created_at or datetime(2024, 1, 1) + timedelta(hours=transaction_id),
        person_id=person_id,
        category_id=category_id,
    )


@pytest.fixture
def transaction_factory():
    return make_transaction
