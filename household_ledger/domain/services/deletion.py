"""Deletion rules for categories and people."""

from household_ledger.domain.models.entities import Category, Person
from household_ledger.domain.models.reports import (
    CategoryDeletionCheck,
    PersonDeletionSummary,
)


def can_delete_category(
    category: Category,
    referencing_count: int,
) -> CategoryDeletionCheck:
    """Decide whether a category may be removed.

    A category is removable only while no transaction references it.

    Args:
        category: Category being checked.
        referencing_count: Number of transactions that reference it.

    Returns:
        CategoryDeletionCheck: Decision with a count-bearing reason.

    Raises:
        ValueError: If the count is negative.
    """
    if referencing_count < 0:
        raise ValueError(
            f"Transaction count cannot be negative: {referencing_count}"
        )
    allowed = referencing_count == 0
    if allowed:
        reason = "Categoria pode ser removida"
    else:
        reason = (
            f"Categoria não pode ser removida pois possui "
            f"{referencing_count} transação(ões) associada(s)"
        )
    return CategoryDeletionCheck(
        category_id=category.id,
        allowed=allowed,
        transaction_count=referencing_count,
        reason=reason,
    )


def summarize_person_deletion(
    person: Person,
    transaction_count: int,
) -> PersonDeletionSummary:
    """Describe the cascade triggered by removing a person."""
    return PersonDeletionSummary(
        person_id=person.id,
        name=person.name,
        removed_transactions=transaction_count,
        message=f"Pessoa '{person.name}' foi removida com sucesso.",
    )


__all__ = ["can_delete_category", "summarize_person_deletion"]
