"""Routes under /api/transacoes."""

from fastapi import APIRouter, Depends, Query, status

from household_ledger.adapters.api.dependencies import get_logger, get_repository
from household_ledger.adapters.api.schemas import TransactionIn
from household_ledger.adapters.presenters import (
    stats_payload,
    transaction_payload,
    validation_payload,
)
from household_ledger.application.use_cases.get_totals_reports import (
    GetTransactionStatsUseCase,
)
from household_ledger.application.use_cases.manage_transactions import (
    CreateTransactionUseCase,
    DeleteTransactionUseCase,
    GetTransactionUseCase,
    ListRecentTransactionsUseCase,
    ListTransactionsUseCase,
    UpdateTransactionUseCase,
    ValidateTransactionUseCase,
)
from household_ledger.domain.constants import DEFAULT_RECENT_LIMIT

router = APIRouter(prefix="/api/transacoes", tags=["transacoes"])


@router.get("")
def list_transactions(
    person_id: int | None = Query(None, alias="pessoaId"),
    category_id: int | None = Query(None, alias="categoriaId"),
    transaction_type: int | None = Query(None, alias="tipo"),
    repository=Depends(get_repository),
    logger=Depends(get_logger),
):
    items = ListTransactionsUseCase(repository, logger=logger).execute(
        person_id=person_id,
        category_id=category_id,
        transaction_type=transaction_type,
    )
    return [transaction_payload(item) for item in items]


@router.get("/estatisticas")
def transaction_stats(
    repository=Depends(get_repository),
    logger=Depends(get_logger),
):
    stats = GetTransactionStatsUseCase(repository, logger=logger).execute()
    return stats_payload(stats)


@router.get("/recentes")
def recent_transactions(
    limit: int = Query(DEFAULT_RECENT_LIMIT, alias="limite"),
    repository=Depends(get_repository),
    logger=Depends(get_logger),
):
    items = ListRecentTransactionsUseCase(repository, logger=logger).execute(
        limit
    )
    return [transaction_payload(item) for item in items]


@router.get("/validar")
def validate_transaction(
    person_id: int = Query(..., alias="pessoaId"),
    category_id: int = Query(..., alias="categoriaId"),
    transaction_type: int = Query(..., alias="tipo"),
    repository=Depends(get_repository),
    logger=Depends(get_logger),
):
    validation = ValidateTransactionUseCase(repository, logger=logger).execute(
        person_id,
        category_id,
        transaction_type,
    )
    return validation_payload(validation)


@router.get("/{transaction_id}")
def get_transaction(
    transaction_id: int,
    repository=Depends(get_repository),
    logger=Depends(get_logger),
):
    details = GetTransactionUseCase(repository, logger=logger).execute(
        transaction_id
    )
    return transaction_payload(details)


@router.post("", status_code=status.HTTP_201_CREATED)
def create_transaction(
    payload: TransactionIn,
    repository=Depends(get_repository),
    logger=Depends(get_logger),
):
    details = CreateTransactionUseCase(repository, logger=logger).execute(
        description=payload.description,
        amount=payload.amount,
        transaction_type=payload.type,
        person_id=payload.person_id,
        category_id=payload.category_id,
    )
    return transaction_payload(details)


@router.put("/{transaction_id}")
def update_transaction(
    transaction_id: int,
    payload: TransactionIn,
    repository=Depends(get_repository),
    logger=Depends(get_logger),
):
    details = UpdateTransactionUseCase(repository, logger=logger).execute(
        transaction_id,
        description=payload.description,
        amount=payload.amount,
        transaction_type=payload.type,
        person_id=payload.person_id,
        category_id=payload.category_id,
    )
    return transaction_payload(details)


@router.delete("/{transaction_id}")
def delete_transaction(
    transaction_id: int,
    repository=Depends(get_repository),
    logger=Depends(get_logger),
):
    transaction = DeleteTransactionUseCase(repository, logger=logger).execute(
        transaction_id
    )
    return {
        "message": f"Transação {transaction.id} foi removida com sucesso.",
    }


__all__ = ["router"]
