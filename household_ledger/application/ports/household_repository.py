"""Port for reading and writing household records.

Use cases depend on this protocol only, so the rule engine can run against
the SQLAlchemy adapter in production and an in-memory fake in tests.
"""

from datetime import datetime
from decimal import Decimal
from typing import Protocol

from household_ledger.domain.models import (
    Category,
    CategoryPurpose,
    Person,
    Transaction,
    TransactionFilter,
    TransactionType,
)


class HouseholdRepositoryPort(Protocol):
    """Port exposing lookups and persistence for people, categories and
    transactions.

    Implementations must enforce name/description uniqueness and the
    cascade/restrict delete rules durably, raising IntegrityConflictError
    when a write violates them.
    """

    def find_person_by_id(self, person_id: int) -> Person | None:
        """Return the person or None when it does not exist."""

    def find_category_by_id(self, category_id: int) -> Category | None:
        """Return the category or None when it does not exist."""

    def find_transaction_by_id(
        self,
        transaction_id: int,
    ) -> Transaction | None:
        """Return the transaction or None when it does not exist."""

    def list_people(self) -> list[Person]:
        """Return every person ordered by id."""

    def list_categories(self) -> list[Category]:
        """Return every category ordered by id."""

    def list_transactions(
        self,
        criteria: TransactionFilter | None = None,
        limit: int | None = None,
    ) -> list[Transaction]:
        """Return matching transactions, newest first."""

    def count_transactions_referencing_category(self, category_id: int) -> int:
        """Return how many transactions use the category."""

    def count_transactions_for_person(self, person_id: int) -> int:
        """Return how many transactions the person owns."""

    def count_transactions_by_person(self) -> dict[int, int]:
        """Return transaction counts keyed by person id."""

    def count_transactions_by_category(self) -> dict[int, int]:
        """Return transaction counts keyed by category id."""

    def name_exists(
        self,
        name: str,
        excluding_person_id: int | None = None,
    ) -> bool:
        """Return True when another person uses the name, ignoring case."""

    def description_exists(self, description: str) -> bool:
        """Return True when a category uses the description, ignoring case."""

    def add_person(self, name: str, age: int) -> Person:
        """Persist a new person and return it with its id."""

    def update_person(self, person_id: int, name: str, age: int) -> Person:
        """Overwrite a person's name and age."""

    def delete_person(self, person_id: int) -> None:
        """Remove a person together with its transactions."""

    def add_category(
        self,
        description: str,
        purpose: CategoryPurpose,
    ) -> Category:
        """Persist a new category and return it with its id."""

    def delete_category(self, category_id: int) -> None:
        """Remove an unreferenced category."""

    def add_transaction(
        self,
        description: str,
        amount: Decimal,
        transaction_type: TransactionType,
        created_at: datetime,
        person_id: int,
        category_id: int,
    ) -> Transaction:
        """Persist a new transaction and return it with its id."""

    def update_transaction(
        self,
        transaction_id: int,
        description: str,
        amount: Decimal,
        transaction_type: TransactionType,
        person_id: int,
        category_id: int,
    ) -> Transaction:
        """Overwrite a transaction's editable fields; created_at is kept."""

    def delete_transaction(self, transaction_id: int) -> None:
        """Remove a single transaction."""


__all__ = ["HouseholdRepositoryPort"]
