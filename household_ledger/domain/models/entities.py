"""Domain entities for people, categories and transactions."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum

from household_ledger.domain.constants import ADULT_AGE


class TransactionType(Enum):
    """Direction of a transaction. Values are the stored/wire codes."""

    EXPENSE = 1
    INCOME = 2

    @property
    def label(self) -> str:
        return "Despesa" if self is TransactionType.EXPENSE else "Receita"

    @classmethod
    def from_code(cls, value) -> "TransactionType | None":
        """Resolve a raw code into a member, or None when unknown.

        Args:
            value: Member, integer code or numeric string.

        Returns:
            TransactionType | None: Matching member.
        """
        return _resolve_member(cls, value)


class CategoryPurpose(Enum):
    """Which transaction types a category may classify."""

    EXPENSE = 1
    INCOME = 2
    BOTH = 3

    @property
    def label(self) -> str:
        return _PURPOSE_LABELS[self]

    @classmethod
    def from_code(cls, value) -> "CategoryPurpose | None":
        """Resolve a raw code into a member, or None when unknown."""
        return _resolve_member(cls, value)

    def permits(self, transaction_type: TransactionType) -> bool:
        """Return True when transactions of the given type may use it."""
        if self is CategoryPurpose.BOTH:
            return True
        if self is CategoryPurpose.EXPENSE:
            return transaction_type is TransactionType.EXPENSE
        return transaction_type is TransactionType.INCOME


_PURPOSE_LABELS = {
    CategoryPurpose.EXPENSE: "Despesa",
    CategoryPurpose.INCOME: "Receita",
    CategoryPurpose.BOTH: "Ambas",
}


def _resolve_member(enum_cls, value):
    if isinstance(value, enum_cls):
        return value
    if value is None or isinstance(value, bool):
        return None
    try:
        return enum_cls(int(value))
    except (TypeError, ValueError):
        return None


@dataclass(frozen=True)
class Person:
    """A household member.

    Attributes:
        id: Identifier assigned by storage.
        name: Display name, unique case-insensitively.
        age: Age in years (0-150).
    """

    id: int
    name: str
    age: int

    @property
    def is_minor(self) -> bool:
        return self.age < ADULT_AGE


@dataclass(frozen=True)
class Category:
    """A classification label for transactions."""

    id: int
    description: str
    purpose: CategoryPurpose

    def permits(self, transaction_type: TransactionType) -> bool:
        """Return True when the category accepts the transaction type."""
        return self.purpose.permits(transaction_type)


@dataclass(frozen=True)
class Transaction:
    """A single income or expense entry.

    Attributes:
        id: Identifier assigned by storage.
        description: Free text description.
        amount: Strictly positive amount with two fractional digits.
        type: Expense or income.
        created_at: Registration timestamp, set once at creation.
        person_id: Owning person.
        category_id: Classifying category.
    """

    id: int
    description: str
    amount: Decimal
    type: TransactionType
    created_at: datetime
    person_id: int
    category_id: int

    @property
    def signed_amount(self) -> Decimal:
        """Amount with sign applied: positive income, negative expense."""
        if self.type is TransactionType.INCOME:
            return self.amount
        return -self.amount


__all__ = [
    "TransactionType",
    "CategoryPurpose",
    "Person",
    "Category",
    "Transaction",
]
