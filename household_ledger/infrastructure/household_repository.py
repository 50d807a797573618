"""SQLAlchemy-backed repository for household records."""

from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime
from decimal import Decimal

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.engine import Connection, Row
from sqlalchemy.exc import IntegrityError

from household_ledger.application.ports.database import DatabaseEnginePort
from household_ledger.application.ports.household_repository import (
    HouseholdRepositoryPort,
)
from household_ledger.domain.errors import IntegrityConflictError
from household_ledger.domain.models import (
    Category,
    CategoryPurpose,
    FailureReason,
    Person,
    Transaction,
    TransactionFilter,
    TransactionType,
    ValidationIssue,
)
from household_ledger.domain.policies.naming import labels_match
from household_ledger.infrastructure.schema import (
    categories,
    people,
    transactions,
)
from household_ledger.utils.decimal_utils import quantize_money


class SqlAlchemyHouseholdRepository(HouseholdRepositoryPort):
    """Repository backed by SQLAlchemy Core for people, categories and
    transactions."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the household engine.
        """
        self._db_port = db_port

    def find_person_by_id(self, person_id: int) -> Person | None:
        query = select(people).where(people.c.id == person_id)
        with self._db_port.get_engine().connect() as conn:
            row = conn.execute(query).first()
        return _to_person(row) if row else None

    def find_category_by_id(self, category_id: int) -> Category | None:
        query = select(categories).where(categories.c.id == category_id)
        with self._db_port.get_engine().connect() as conn:
            row = conn.execute(query).first()
        return _to_category(row) if row else None

    def find_transaction_by_id(
        self,
        transaction_id: int,
    ) -> Transaction | None:
        query = select(transactions).where(transactions.c.id == transaction_id)
        with self._db_port.get_engine().connect() as conn:
            row = conn.execute(query).first()
        return _to_transaction(row) if row else None

    def list_people(self) -> list[Person]:
        query = select(people).order_by(people.c.id)
        with self._db_port.get_engine().connect() as conn:
            rows = conn.execute(query).all()
        return [_to_person(row) for row in rows]

    def list_categories(self) -> list[Category]:
        query = select(categories).order_by(categories.c.id)
        with self._db_port.get_engine().connect() as conn:
            rows = conn.execute(query).all()
        return [_to_category(row) for row in rows]

    def list_transactions(
        self,
        criteria: TransactionFilter | None = None,
        limit: int | None = None,
    ) -> list[Transaction]:
        query = self._build_transactions_query(criteria or TransactionFilter())
        if limit is not None:
            query = query.limit(limit)
        with self._db_port.get_engine().connect() as conn:
            rows = conn.execute(query).all()
        return [_to_transaction(row) for row in rows]

    def count_transactions_referencing_category(self, category_id: int) -> int:
        query = (
            select(func.count())
            .select_from(transactions)
            .where(transactions.c.category_id == category_id)
        )
        with self._db_port.get_engine().connect() as conn:
            return conn.execute(query).scalar_one()

    def count_transactions_for_person(self, person_id: int) -> int:
        query = (
            select(func.count())
            .select_from(transactions)
            .where(transactions.c.person_id == person_id)
        )
        with self._db_port.get_engine().connect() as conn:
            return conn.execute(query).scalar_one()

    def count_transactions_by_person(self) -> dict[int, int]:
        return self._count_grouped(transactions.c.person_id)

    def count_transactions_by_category(self) -> dict[int, int]:
        return self._count_grouped(transactions.c.category_id)

    def name_exists(
        self,
        name: str,
        excluding_person_id: int | None = None,
    ) -> bool:
        query = select(people.c.id, people.c.name)
        if excluding_person_id is not None:
            query = query.where(people.c.id != excluding_person_id)
        with self._db_port.get_engine().connect() as conn:
            rows = conn.execute(query).all()
        return any(labels_match(row.name, name) for row in rows)

    def description_exists(self, description: str) -> bool:
        query = select(categories.c.description)
        with self._db_port.get_engine().connect() as conn:
            rows = conn.execute(query).all()
        return any(labels_match(row.description, description) for row in rows)

    def add_person(self, name: str, age: int) -> Person:
        statement = insert(people).values(name=name, age=age)
        with self._write() as conn:
            result = conn.execute(statement)
            person_id = result.inserted_primary_key[0]
        return Person(id=person_id, name=name, age=age)

    def update_person(self, person_id: int, name: str, age: int) -> Person:
        statement = (
            update(people)
            .where(people.c.id == person_id)
            .values(name=name, age=age)
        )
        with self._write() as conn:
            conn.execute(statement)
        return Person(id=person_id, name=name, age=age)

    def delete_person(self, person_id: int) -> None:
        # Transactions go with the person through ON DELETE CASCADE.
        with self._write() as conn:
            conn.execute(delete(people).where(people.c.id == person_id))

    def add_category(
        self,
        description: str,
        purpose: CategoryPurpose,
    ) -> Category:
        statement = insert(categories).values(
            description=description,
            purpose=purpose.value,
        )
        with self._write() as conn:
            result = conn.execute(statement)
            category_id = result.inserted_primary_key[0]
        return Category(id=category_id, description=description, purpose=purpose)

    def delete_category(self, category_id: int) -> None:
        with self._write() as conn:
            conn.execute(
                delete(categories).where(categories.c.id == category_id)
            )

    def add_transaction(
        self,
        description: str,
        amount: Decimal,
        transaction_type: TransactionType,
        created_at: datetime,
        person_id: int,
        category_id: int,
    ) -> Transaction:
        statement = insert(transactions).values(
            description=description,
            amount=amount,
            type=transaction_type.value,
            created_at=created_at,
            person_id=person_id,
            category_id=category_id,
        )
        with self._write() as conn:
            result = conn.execute(statement)
            transaction_id = result.inserted_primary_key[0]
        return Transaction(
            id=transaction_id,
            description=description,
            amount=quantize_money(amount),
            type=transaction_type,
            created_at=created_at,
            person_id=person_id,
            category_id=category_id,
        )

    def update_transaction(
        self,
        transaction_id: int,
        description: str,
        amount: Decimal,
        transaction_type: TransactionType,
        person_id: int,
        category_id: int,
    ) -> Transaction:
        statement = (
            update(transactions)
            .where(transactions.c.id == transaction_id)
            .values(
                description=description,
                amount=amount,
                type=transaction_type.value,
                person_id=person_id,
                category_id=category_id,
            )
        )
        with self._write() as conn:
            conn.execute(statement)
        return self.find_transaction_by_id(transaction_id)

    def delete_transaction(self, transaction_id: int) -> None:
        with self._write() as conn:
            conn.execute(
                delete(transactions).where(transactions.c.id == transaction_id)
            )

    def _build_transactions_query(self, criteria: TransactionFilter):
        query = select(transactions)
        if criteria.person_id is not None:
            query = query.where(transactions.c.person_id == criteria.person_id)
        if criteria.category_id is not None:
            query = query.where(
                transactions.c.category_id == criteria.category_id
            )
        if criteria.type is not None:
            query = query.where(transactions.c.type == criteria.type.value)
        return query.order_by(
            transactions.c.created_at.desc(),
            transactions.c.id.desc(),
        )

    def _count_grouped(self, column) -> dict[int, int]:
        query = select(column, func.count()).group_by(column)
        with self._db_port.get_engine().connect() as conn:
            rows = conn.execute(query).all()
        return {row[0]: row[1] for row in rows}

    @contextmanager
    def _write(self) -> Iterator[Connection]:
        """Open a write transaction, translating constraint violations."""
        try:
            with self._db_port.get_engine().begin() as conn:
                yield conn
        except IntegrityError as exc:
            raise IntegrityConflictError(
                [
                    ValidationIssue(
                        FailureReason.INTEGRITY_CONFLICT,
                        f"Operação rejeitada pelo banco de dados: {exc.orig}",
                    )
                ]
            ) from exc


def _to_person(row: Row) -> Person:
    return Person(id=row.id, name=row.name, age=row.age)


def _to_category(row: Row) -> Category:
    return Category(
        id=row.id,
        description=row.description,
        purpose=CategoryPurpose(row.purpose),
    )


def _to_transaction(row: Row) -> Transaction:
    return Transaction(
        id=row.id,
        description=row.description,
        amount=quantize_money(row.amount),
        type=TransactionType(row.type),
        created_at=row.created_at,
        person_id=row.person_id,
        category_id=row.category_id,
    )


__all__ = ["SqlAlchemyHouseholdRepository"]
