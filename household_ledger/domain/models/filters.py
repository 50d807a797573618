"""Transaction listing filters."""

from dataclasses import dataclass

from household_ledger.domain.models.entities import Transaction, TransactionType


@dataclass(frozen=True)
class TransactionFilter:
    """Conjunctive equality filter; a None field means no restriction."""

    person_id: int | None = None
    category_id: int | None = None
    type: TransactionType | None = None

    def matches(self, transaction: Transaction) -> bool:
        if self.person_id is not None and transaction.person_id != self.person_id:
            return False
        if (
            self.category_id is not None
            and transaction.category_id != self.category_id
        ):
            return False
        if self.type is not None and transaction.type is not self.type:
            return False
        return True


__all__ = ["TransactionFilter"]
