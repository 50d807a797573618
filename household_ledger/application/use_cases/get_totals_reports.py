"""Use cases computing per-person, per-category and global totals."""

from household_ledger.application.ports.household_repository import (
    HouseholdRepositoryPort,
)
from household_ledger.domain.models import (
    CategoryTotalsReport,
    PersonTotalsReport,
    TransactionStats,
)
from household_ledger.domain.services.aggregation import (
    aggregate_by_category,
    aggregate_by_person,
    compute_transaction_stats,
)
from household_ledger.infrastructure.logging.logger import get_app_logger


class GetPersonTotalsUseCase:
    """Compute income, expense and balance for every person."""

    def __init__(self, repository: HouseholdRepositoryPort, logger=None) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing household records.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self) -> PersonTotalsReport:
        people = self._repository.list_people()
        transactions = self._repository.list_transactions()
        known = {person.id for person in people}
        orphans = sum(1 for tx in transactions if tx.person_id not in known)
        if orphans:
            self._logger.warning(
                f"Ignored {orphans} transactions with unknown people"
            )
        report = aggregate_by_person(people, transactions)
        self._logger.info(
            f"Person totals computed for {len(report.rows)} people: "
            f"balance={report.grand_total.balance}"
        )
        return report


class GetCategoryTotalsUseCase:
    """Compute income, expense and balance for every category."""

    def __init__(self, repository: HouseholdRepositoryPort, logger=None) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing household records.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self) -> CategoryTotalsReport:
        categories = self._repository.list_categories()
        transactions = self._repository.list_transactions()
        known = {category.id for category in categories}
        orphans = sum(1 for tx in transactions if tx.category_id not in known)
        if orphans:
            self._logger.warning(
                f"Ignored {orphans} transactions with unknown categories"
            )
        report = aggregate_by_category(categories, transactions)
        self._logger.info(
            f"Category totals computed for {len(report.rows)} categories: "
            f"balance={report.grand_total.balance}"
        )
        return report


class GetTransactionStatsUseCase:
    """Compute global transaction statistics."""

    def __init__(self, repository: HouseholdRepositoryPort, logger=None) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self) -> TransactionStats:
        stats = compute_transaction_stats(self._repository.list_transactions())
        self._logger.info(
            f"Transaction stats computed: count={stats.total_transactions}"
        )
        return stats


__all__ = [
    "GetPersonTotalsUseCase",
    "GetCategoryTotalsUseCase",
    "GetTransactionStatsUseCase",
]
