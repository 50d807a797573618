"""Business rule validation for people, categories and transactions.

Every validator collects all applicable problems instead of stopping at the
first one, so the same functions back both the write path and the advisory
pre-flight check.
"""

from decimal import Decimal

from household_ledger.domain.constants import (
    MAX_AGE,
    MAX_AMOUNT,
    MAX_DESCRIPTION_LENGTH,
    MAX_PERSON_NAME_LENGTH,
    MIN_AGE,
)
from household_ledger.domain.models.entities import (
    Category,
    CategoryPurpose,
    Person,
    TransactionType,
)
from household_ledger.domain.models.validation import (
    FailureReason,
    TransactionValidation,
    ValidationIssue,
)
from household_ledger.domain.policies.naming import normalize_label
from household_ledger.utils.decimal_utils import (
    coerce_decimal,
    has_at_most_two_places,
)

INVALID_TYPE_MESSAGE = "Tipo deve ser: 1 = Despesa, 2 = Receita"
INVALID_PURPOSE_MESSAGE = "Finalidade deve ser: 1 = Despesa, 2 = Receita, 3 = Ambas"

_PURPOSE_PLURALS = {
    CategoryPurpose.EXPENSE: "despesas",
    CategoryPurpose.INCOME: "receitas",
    CategoryPurpose.BOTH: "ambas",
}


def validate_transaction(
    person: Person | None,
    category: Category | None,
    proposed_type: TransactionType,
    *,
    person_id: int | None = None,
    category_id: int | None = None,
) -> TransactionValidation:
    """Check whether a transaction may be registered.

    Args:
        person: Resolved owner, or None when it was not found.
        category: Resolved category, or None when it was not found.
        proposed_type: Type of the proposed transaction.
        person_id: Requested person id, used in not-found messages.
        category_id: Requested category id, used in not-found messages.

    Returns:
        TransactionValidation: Ordered violations; empty when legal.
    """
    issues: list[ValidationIssue] = []
    if person is None:
        issues.append(
            ValidationIssue(
                FailureReason.PERSON_NOT_FOUND,
                f"Pessoa com ID {_display_id(person_id)} não foi encontrada.",
            )
        )
    if category is None:
        issues.append(
            ValidationIssue(
                FailureReason.CATEGORY_NOT_FOUND,
                f"Categoria com ID {_display_id(category_id)} "
                f"não foi encontrada.",
            )
        )
    if (
        person is not None
        and person.is_minor
        and proposed_type is TransactionType.INCOME
    ):
        issues.append(
            ValidationIssue(
                FailureReason.MINOR_CANNOT_RECEIVE_INCOME,
                f"Pessoa menor de idade ({person.name}, {person.age} anos) "
                f"só pode registrar despesas.",
            )
        )
    if category is not None and not category.permits(proposed_type):
        type_label = proposed_type.label.lower()
        issues.append(
            ValidationIssue(
                FailureReason.CATEGORY_TYPE_MISMATCH,
                f"A categoria '{category.description}' só permite "
                f"{_PURPOSE_PLURALS[category.purpose]}, mas você está "
                f"tentando registrar uma {type_label}.",
            )
        )
    return TransactionValidation(issues=tuple(issues))


def validate_person_fields(name: str | None, age) -> list[ValidationIssue]:
    """Check the editable fields of a person.

    Args:
        name: Raw name; surrounding whitespace is ignored.
        age: Raw age value.

    Returns:
        list[ValidationIssue]: Field violations in field order.
    """
    issues: list[ValidationIssue] = []
    cleaned = normalize_label(name)
    if not cleaned:
        issues.append(
            ValidationIssue(FailureReason.INVALID_NAME, "Nome é obrigatório")
        )
    elif len(cleaned) > MAX_PERSON_NAME_LENGTH:
        issues.append(
            ValidationIssue(
                FailureReason.INVALID_NAME,
                f"Nome não pode exceder {MAX_PERSON_NAME_LENGTH} caracteres",
            )
        )
    if (
        not isinstance(age, int)
        or isinstance(age, bool)
        or not MIN_AGE <= age <= MAX_AGE
    ):
        issues.append(
            ValidationIssue(
                FailureReason.INVALID_AGE,
                f"Idade deve estar entre {MIN_AGE} e {MAX_AGE} anos",
            )
        )
    return issues


def validate_category_fields(
    description: str | None,
    purpose,
) -> list[ValidationIssue]:
    """Check the fields of a new category.

    Args:
        description: Raw description.
        purpose: Raw purpose code or CategoryPurpose member.

    Returns:
        list[ValidationIssue]: Field violations in field order.
    """
    issues = _description_issues(description)
    if CategoryPurpose.from_code(purpose) is None:
        issues.append(
            ValidationIssue(
                FailureReason.INVALID_PURPOSE,
                INVALID_PURPOSE_MESSAGE,
            )
        )
    return issues


def validate_transaction_fields(
    description: str | None,
    amount,
) -> list[ValidationIssue]:
    """Check the free-form fields of a transaction.

    Args:
        description: Raw description.
        amount: Raw amount; must be positive with at most two decimals.

    Returns:
        list[ValidationIssue]: Field violations in field order.
    """
    issues = _description_issues(description)
    amount_issue = _amount_issue(amount)
    if amount_issue is not None:
        issues.append(amount_issue)
    return issues


def invalid_type_issue() -> ValidationIssue:
    """Return the issue reported for an unknown transaction type code."""
    return ValidationIssue(FailureReason.INVALID_TYPE, INVALID_TYPE_MESSAGE)


def _description_issues(description: str | None) -> list[ValidationIssue]:
    cleaned = normalize_label(description)
    if not cleaned:
        return [
            ValidationIssue(
                FailureReason.INVALID_DESCRIPTION,
                "Descrição é obrigatória",
            )
        ]
    if len(cleaned) > MAX_DESCRIPTION_LENGTH:
        return [
            ValidationIssue(
                FailureReason.INVALID_DESCRIPTION,
                f"Descrição não pode exceder {MAX_DESCRIPTION_LENGTH} "
                f"caracteres",
            )
        ]
    return []


def _amount_issue(amount) -> ValidationIssue | None:
    try:
        value = coerce_decimal(amount) if amount is not None else None
    except ValueError:
        value = None
    if value is None or not value.is_finite() or value <= Decimal("0"):
        return ValidationIssue(
            FailureReason.INVALID_AMOUNT,
            "Valor deve ser positivo",
        )
    if value > MAX_AMOUNT:
        return ValidationIssue(
            FailureReason.INVALID_AMOUNT,
            f"Valor não pode exceder {MAX_AMOUNT}",
        )
    if not has_at_most_two_places(value):
        return ValidationIssue(
            FailureReason.INVALID_AMOUNT,
            "Valor deve ter no máximo 2 casas decimais",
        )
    return None


def _display_id(entity_id: int | None) -> str:
    return "?" if entity_id is None else str(entity_id)


__all__ = [
    "INVALID_TYPE_MESSAGE",
    "INVALID_PURPOSE_MESSAGE",
    "validate_transaction",
    "validate_person_fields",
    "validate_category_fields",
    "validate_transaction_fields",
    "invalid_type_issue",
]
