"""Routes under /api/categorias."""

from fastapi import APIRouter, Depends, status

from household_ledger.adapters.api.dependencies import get_logger, get_repository
from household_ledger.adapters.api.schemas import CategoryIn
from household_ledger.adapters.presenters import (
    category_overview_payload,
    category_payload,
    category_totals_payload,
    deletion_check_payload,
)
from household_ledger.application.use_cases.get_totals_reports import (
    GetCategoryTotalsUseCase,
)
from household_ledger.application.use_cases.manage_categories import (
    CheckCategoryDeletionUseCase,
    CreateCategoryUseCase,
    DeleteCategoryUseCase,
    GetCategoryUseCase,
    ListCategoriesForTypeUseCase,
    ListCategoriesUseCase,
)

router = APIRouter(prefix="/api/categorias", tags=["categorias"])


@router.get("")
def list_categories(
    repository=Depends(get_repository),
    logger=Depends(get_logger),
):
    overviews = ListCategoriesUseCase(repository, logger=logger).execute()
    return [category_overview_payload(item) for item in overviews]


@router.get("/relatorio-totais")
def category_totals(
    repository=Depends(get_repository),
    logger=Depends(get_logger),
):
    report = GetCategoryTotalsUseCase(repository, logger=logger).execute()
    return category_totals_payload(report)


@router.get("/por-tipo/{tipo}")
def categories_for_type(
    tipo: int,
    repository=Depends(get_repository),
    logger=Depends(get_logger),
):
    overviews = ListCategoriesForTypeUseCase(repository, logger=logger).execute(
        tipo
    )
    return [category_overview_payload(item) for item in overviews]


@router.get("/{category_id}")
def get_category(
    category_id: int,
    repository=Depends(get_repository),
    logger=Depends(get_logger),
):
    overview = GetCategoryUseCase(repository, logger=logger).execute(
        category_id
    )
    return category_overview_payload(overview)


@router.get("/{category_id}/pode-remover")
def can_remove_category(
    category_id: int,
    repository=Depends(get_repository),
    logger=Depends(get_logger),
):
    check = CheckCategoryDeletionUseCase(repository, logger=logger).execute(
        category_id
    )
    return deletion_check_payload(check)


@router.post("", status_code=status.HTTP_201_CREATED)
def create_category(
    payload: CategoryIn,
    repository=Depends(get_repository),
    logger=Depends(get_logger),
):
    category = CreateCategoryUseCase(repository, logger=logger).execute(
        payload.description,
        payload.purpose,
    )
    return category_payload(category)


@router.delete("/{category_id}")
def delete_category(
    category_id: int,
    repository=Depends(get_repository),
    logger=Depends(get_logger),
):
    check = DeleteCategoryUseCase(repository, logger=logger).execute(
        category_id
    )
    return deletion_check_payload(check)


__all__ = ["router"]
