"""Relational layout of the household database.

Uniqueness of names and descriptions is enforced case-insensitively by
expression indexes; transactions cascade with their person and block the
removal of their category. Amounts are stored as integer cents so every
backend, SQLite included, keeps them exact.
"""

from decimal import Decimal

from sqlalchemy import (
    BigInteger,
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    TypeDecorator,
    func,
    insert,
    select,
)
from sqlalchemy.engine import Engine

from household_ledger.domain.constants import (
    MAX_AGE,
    MAX_DESCRIPTION_LENGTH,
    MAX_PERSON_NAME_LENGTH,
    MIN_AGE,
)
from household_ledger.domain.models import CategoryPurpose
from household_ledger.utils.decimal_utils import MONEY_QUANTUM, quantize_money


class Cents(TypeDecorator):
    """Decimal money persisted as an integer number of cents."""

    impl = BigInteger
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return int(quantize_money(value) / MONEY_QUANTUM)

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return quantize_money(Decimal(value) * MONEY_QUANTUM)


metadata = MetaData()

people = Table(
    "people",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(MAX_PERSON_NAME_LENGTH), nullable=False),
    Column("age", Integer, nullable=False),
    CheckConstraint(
        f"age BETWEEN {MIN_AGE} AND {MAX_AGE}",
        name="ck_people_age_range",
    ),
)
Index("uq_people_name_ci", func.lower(people.c.name), unique=True)

categories = Table(
    "categories",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("description", String(MAX_DESCRIPTION_LENGTH), nullable=False),
    Column("purpose", Integer, nullable=False),
    CheckConstraint("purpose IN (1, 2, 3)", name="ck_categories_purpose"),
)
Index(
    "uq_categories_description_ci",
    func.lower(categories.c.description),
    unique=True,
)

transactions = Table(
    "transactions",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("description", String(MAX_DESCRIPTION_LENGTH), nullable=False),
    Column("amount", Cents(), nullable=False),
    Column("type", Integer, nullable=False),
    Column("created_at", DateTime, nullable=False),
    Column(
        "person_id",
        Integer,
        ForeignKey("people.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    ),
    Column(
        "category_id",
        Integer,
        ForeignKey("categories.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    ),
    CheckConstraint("amount > 0", name="ck_transactions_amount_positive"),
    CheckConstraint("type IN (1, 2)", name="ck_transactions_type"),
)
Index("ix_transactions_created_at", transactions.c.created_at)
Index("ix_transactions_type", transactions.c.type)

DEFAULT_CATEGORIES = (
    ("Alimentação", CategoryPurpose.EXPENSE),
    ("Transporte", CategoryPurpose.EXPENSE),
    ("Moradia", CategoryPurpose.EXPENSE),
    ("Saúde", CategoryPurpose.EXPENSE),
    ("Educação", CategoryPurpose.EXPENSE),
    ("Lazer", CategoryPurpose.EXPENSE),
    ("Salário", CategoryPurpose.INCOME),
    ("Freelance", CategoryPurpose.INCOME),
    ("Investimentos", CategoryPurpose.INCOME),
    ("Outros", CategoryPurpose.BOTH),
)


def create_schema(engine: Engine) -> None:
    """Create every table and index that does not exist yet."""
    metadata.create_all(engine)


def seed_default_categories(engine: Engine) -> int:
    """Insert the default categories into an empty categories table.

    Args:
        engine: Engine connected to the household database.

    Returns:
        int: Number of categories inserted (0 when any already exist).
    """
    with engine.begin() as conn:
        existing = conn.execute(
            select(func.count()).select_from(categories)
        ).scalar_one()
        if existing:
            return 0
        conn.execute(
            insert(categories),
            [
                {"description": description, "purpose": purpose.value}
                for description, purpose in DEFAULT_CATEGORIES
            ],
        )
    return len(DEFAULT_CATEGORIES)


__all__ = [
    "Cents",
    "metadata",
    "people",
    "categories",
    "transactions",
    "DEFAULT_CATEGORIES",
    "create_schema",
    "seed_default_categories",
]
