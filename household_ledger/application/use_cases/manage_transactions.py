"""Use cases to register, validate, list and remove transactions."""

from collections.abc import Callable
from datetime import datetime

from household_ledger.application.ports.household_repository import (
    HouseholdRepositoryPort,
)
from household_ledger.domain.errors import NotFoundError, ValidationFailureError
from household_ledger.domain.models import (
    Transaction,
    TransactionDetails,
    TransactionFilter,
    TransactionType,
    TransactionValidation,
    ValidationIssue,
)
from household_ledger.domain.policies.naming import normalize_label
from household_ledger.domain.services.filtering import clamp_recent_limit
from household_ledger.domain.services.validation import (
    invalid_type_issue,
    validate_transaction,
    validate_transaction_fields,
)
from household_ledger.infrastructure.logging.logger import get_app_logger
from household_ledger.utils.decimal_utils import quantize_money

TRANSACTION_ENTITY = "Transação"


class _TransactionsUseCase:
    """Shared wiring for transaction use cases."""

    def __init__(self, repository: HouseholdRepositoryPort, logger=None) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing household records.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()

    def _require_transaction(self, transaction_id: int) -> Transaction:
        transaction = self._repository.find_transaction_by_id(transaction_id)
        if transaction is None:
            self._logger.warning(f"Transaction {transaction_id} not found")
            raise NotFoundError(TRANSACTION_ENTITY, transaction_id)
        return transaction

    def _check_relations(
        self,
        person_id: int,
        category_id: int,
        transaction_type,
    ) -> tuple[TransactionType | None, TransactionValidation]:
        """Resolve the type and run the relation rules against storage.

        An unknown type code is reported on its own, since the age and
        category rules cannot be evaluated without a type.
        """
        resolved = TransactionType.from_code(transaction_type)
        if resolved is None:
            return None, TransactionValidation(issues=(invalid_type_issue(),))
        person = self._repository.find_person_by_id(person_id)
        category = self._repository.find_category_by_id(category_id)
        validation = validate_transaction(
            person,
            category,
            resolved,
            person_id=person_id,
            category_id=category_id,
        )
        return resolved, validation

    def _validated_write(
        self,
        description: str,
        amount,
        transaction_type,
        person_id: int,
        category_id: int,
    ) -> TransactionType:
        issues: list[ValidationIssue] = validate_transaction_fields(
            description,
            amount,
        )
        resolved, validation = self._check_relations(
            person_id,
            category_id,
            transaction_type,
        )
        issues.extend(validation.issues)
        if issues:
            self._logger.warning(
                f"Rejected transaction for person={person_id}, "
                f"category={category_id}: {[i.message for i in issues]}"
            )
            raise ValidationFailureError(issues)
        return resolved

    def _details(self, transactions: list[Transaction]) -> list[TransactionDetails]:
        names = {person.id: person.name for person in self._repository.list_people()}
        descriptions = {
            category.id: category.description
            for category in self._repository.list_categories()
        }
        return [
            TransactionDetails(
                transaction=transaction,
                person_name=names.get(transaction.person_id, ""),
                category_description=descriptions.get(
                    transaction.category_id,
                    "",
                ),
            )
            for transaction in transactions
        ]


class CreateTransactionUseCase(_TransactionsUseCase):
    """Register a transaction once every business rule passes."""

    def __init__(
        self,
        repository: HouseholdRepositoryPort,
        logger=None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing household records.
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Source of creation timestamps.
        """
        super().__init__(repository, logger=logger)
        self._clock = clock

    def execute(
        self,
        description: str,
        amount,
        transaction_type,
        person_id: int,
        category_id: int,
    ) -> TransactionDetails:
        """Create the transaction.

        Args:
            description: Free text; trimmed before storage.
            amount: Positive amount with at most two decimals.
            transaction_type: TransactionType member or its integer code.
            person_id: Owning person.
            category_id: Classifying category.

        Returns:
            TransactionDetails: Stored transaction with owner names.

        Raises:
            ValidationFailureError: With every violated rule.
        """
        resolved = self._validated_write(
            description,
            amount,
            transaction_type,
            person_id,
            category_id,
        )
        transaction = self._repository.add_transaction(
            description=normalize_label(description),
            amount=quantize_money(amount),
            transaction_type=resolved,
            created_at=self._clock(),
            person_id=person_id,
            category_id=category_id,
        )
        self._logger.info(
            f"Created transaction id={transaction.id} "
            f"type={resolved.name} amount={transaction.amount}"
        )
        return self._details([transaction])[0]


class UpdateTransactionUseCase(_TransactionsUseCase):
    """Edit a transaction, re-running every business rule."""

    def execute(
        self,
        transaction_id: int,
        description: str,
        amount,
        transaction_type,
        person_id: int,
        category_id: int,
    ) -> TransactionDetails:
        """Update the transaction; its creation timestamp is preserved.

        Raises:
            NotFoundError: If the transaction does not exist.
            ValidationFailureError: With every violated rule.
        """
        self._require_transaction(transaction_id)
        resolved = self._validated_write(
            description,
            amount,
            transaction_type,
            person_id,
            category_id,
        )
        transaction = self._repository.update_transaction(
            transaction_id,
            description=normalize_label(description),
            amount=quantize_money(amount),
            transaction_type=resolved,
            person_id=person_id,
            category_id=category_id,
        )
        if transaction is None:
            raise NotFoundError(TRANSACTION_ENTITY, transaction_id)
        self._logger.info(f"Updated transaction id={transaction_id}")
        return self._details([transaction])[0]


class DeleteTransactionUseCase(_TransactionsUseCase):
    """Remove a single transaction."""

    def execute(self, transaction_id: int) -> Transaction:
        transaction = self._require_transaction(transaction_id)
        self._repository.delete_transaction(transaction_id)
        self._logger.info(f"Deleted transaction id={transaction_id}")
        return transaction


class GetTransactionUseCase(_TransactionsUseCase):
    """Fetch a single transaction."""

    def execute(self, transaction_id: int) -> TransactionDetails:
        transaction = self._require_transaction(transaction_id)
        return self._details([transaction])[0]


class ListTransactionsUseCase(_TransactionsUseCase):
    """List transactions matching optional filters, newest first."""

    def execute(
        self,
        person_id: int | None = None,
        category_id: int | None = None,
        transaction_type=None,
    ) -> list[TransactionDetails]:
        """Return matching transactions.

        An unknown type code places no restriction on the type.
        """
        criteria = TransactionFilter(
            person_id=person_id,
            category_id=category_id,
            type=TransactionType.from_code(transaction_type),
        )
        transactions = self._repository.list_transactions(criteria)
        self._logger.info(
            f"Listed {len(transactions)} transactions for {criteria}"
        )
        return self._details(transactions)


class ListRecentTransactionsUseCase(_TransactionsUseCase):
    """List the most recently created transactions."""

    def execute(self, limit: int | None = None) -> list[TransactionDetails]:
        transactions = self._repository.list_transactions(
            TransactionFilter(),
            limit=clamp_recent_limit(limit),
        )
        return self._details(transactions)


class ValidateTransactionUseCase(_TransactionsUseCase):
    """Pre-flight check telling whether a transaction could be created."""

    def execute(
        self,
        person_id: int,
        category_id: int,
        transaction_type,
    ) -> TransactionValidation:
        """Return every problem that would block the transaction."""
        _, validation = self._check_relations(
            person_id,
            category_id,
            transaction_type,
        )
        return validation


__all__ = [
    "CreateTransactionUseCase",
    "UpdateTransactionUseCase",
    "DeleteTransactionUseCase",
    "GetTransactionUseCase",
    "ListTransactionsUseCase",
    "ListRecentTransactionsUseCase",
    "ValidateTransactionUseCase",
]
