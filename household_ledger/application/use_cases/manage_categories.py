"""Use cases to register, list and remove categories."""

from household_ledger.application.ports.household_repository import (
    HouseholdRepositoryPort,
)
from household_ledger.domain.errors import NotFoundError, ValidationFailureError
from household_ledger.domain.models import (
    Category,
    CategoryDeletionCheck,
    CategoryOverview,
    CategoryPurpose,
    FailureReason,
    TransactionType,
    ValidationIssue,
)
from household_ledger.domain.policies.naming import normalize_label
from household_ledger.domain.services.deletion import can_delete_category
from household_ledger.domain.services.validation import (
    invalid_type_issue,
    validate_category_fields,
)
from household_ledger.infrastructure.logging.logger import get_app_logger

CATEGORY_ENTITY = "Categoria"


class _CategoriesUseCase:
    """Shared wiring for category use cases."""

    def __init__(self, repository: HouseholdRepositoryPort, logger=None) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing household records.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()

    def _require_category(self, category_id: int) -> Category:
        category = self._repository.find_category_by_id(category_id)
        if category is None:
            self._logger.warning(f"Category {category_id} not found")
            raise NotFoundError(CATEGORY_ENTITY, category_id)
        return category

    def _overviews(self, categories: list[Category]) -> list[CategoryOverview]:
        counts = self._repository.count_transactions_by_category()
        ordered = sorted(categories, key=lambda c: (c.description, c.id))
        return [
            CategoryOverview(
                category=category,
                transaction_count=counts.get(category.id, 0),
            )
            for category in ordered
        ]


class ListCategoriesUseCase(_CategoriesUseCase):
    """List every category ordered by description."""

    def execute(self) -> list[CategoryOverview]:
        categories = self._repository.list_categories()
        self._logger.info(f"Listed {len(categories)} categories")
        return self._overviews(categories)


class ListCategoriesForTypeUseCase(_CategoriesUseCase):
    """List the categories that accept a given transaction type."""

    def execute(self, transaction_type) -> list[CategoryOverview]:
        """Return categories permitting the type.

        Args:
            transaction_type: TransactionType member or its integer code.

        Raises:
            ValidationFailureError: If the type code is unknown.
        """
        resolved = TransactionType.from_code(transaction_type)
        if resolved is None:
            raise ValidationFailureError([invalid_type_issue()])
        categories = [
            category
            for category in self._repository.list_categories()
            if category.permits(resolved)
        ]
        return self._overviews(categories)


class GetCategoryUseCase(_CategoriesUseCase):
    """Fetch a single category."""

    def execute(self, category_id: int) -> CategoryOverview:
        category = self._require_category(category_id)
        count = self._repository.count_transactions_referencing_category(
            category_id
        )
        return CategoryOverview(category=category, transaction_count=count)


class CreateCategoryUseCase(_CategoriesUseCase):
    """Register a new category after checking its fields."""

    def execute(self, description: str, purpose) -> Category:
        """Create the category.

        Args:
            description: Label; trimmed before storage.
            purpose: CategoryPurpose member or its integer code.

        Returns:
            Category: The stored category with its id.

        Raises:
            ValidationFailureError: If a field is invalid or the description
                is already taken.
        """
        issues = validate_category_fields(description, purpose)
        cleaned = normalize_label(description)
        if cleaned and self._repository.description_exists(cleaned):
            issues.insert(
                0,
                ValidationIssue(
                    FailureReason.DUPLICATE_DESCRIPTION,
                    f"Já existe uma categoria cadastrada com a descrição "
                    f"'{cleaned}'.",
                ),
            )
        if issues:
            self._logger.warning(
                f"Rejected category creation: {[i.message for i in issues]}"
            )
            raise ValidationFailureError(issues)
        category = self._repository.add_category(
            cleaned,
            CategoryPurpose.from_code(purpose),
        )
        self._logger.info(f"Created category id={category.id}")
        return category


class CheckCategoryDeletionUseCase(_CategoriesUseCase):
    """Tell whether a category can be removed."""

    def execute(self, category_id: int) -> CategoryDeletionCheck:
        category = self._require_category(category_id)
        count = self._repository.count_transactions_referencing_category(
            category_id
        )
        return can_delete_category(category, count)


class DeleteCategoryUseCase(_CategoriesUseCase):
    """Remove a category that no transaction references."""

    def execute(self, category_id: int) -> CategoryDeletionCheck:
        """Delete the category when the deletion guard allows it.

        Raises:
            NotFoundError: If the category does not exist.
            ValidationFailureError: If transactions still reference it.
        """
        category = self._require_category(category_id)
        check = can_delete_category(
            category,
            self._repository.count_transactions_referencing_category(
                category_id
            ),
        )
        if not check.allowed:
            self._logger.warning(
                f"Refused to delete category id={category_id}: {check.reason}"
            )
            raise ValidationFailureError(
                [ValidationIssue(FailureReason.CATEGORY_IN_USE, check.reason)]
            )
        self._repository.delete_category(category_id)
        self._logger.info(f"Deleted category id={category_id}")
        return check


__all__ = [
    "ListCategoriesUseCase",
    "ListCategoriesForTypeUseCase",
    "GetCategoryUseCase",
    "CreateCategoryUseCase",
    "CheckCategoryDeletionUseCase",
    "DeleteCategoryUseCase",
]
