"""Application use cases package."""

from .get_totals_reports import (
    GetCategoryTotalsUseCase,
    GetPersonTotalsUseCase,
    GetTransactionStatsUseCase,
)
from .manage_categories import (
    CheckCategoryDeletionUseCase,
    CreateCategoryUseCase,
    DeleteCategoryUseCase,
    GetCategoryUseCase,
    ListCategoriesForTypeUseCase,
    ListCategoriesUseCase,
)
from .manage_people import (
    CreatePersonUseCase,
    DeletePersonUseCase,
    GetPersonUseCase,
    ListPeopleUseCase,
    UpdatePersonUseCase,
)
from .manage_transactions import (
    CreateTransactionUseCase,
    DeleteTransactionUseCase,
    GetTransactionUseCase,
    ListRecentTransactionsUseCase,
    ListTransactionsUseCase,
    UpdateTransactionUseCase,
    ValidateTransactionUseCase,
)

__all__ = [
    "GetCategoryTotalsUseCase",
    "GetPersonTotalsUseCase",
    "GetTransactionStatsUseCase",
    "CheckCategoryDeletionUseCase",
    "CreateCategoryUseCase",
    "DeleteCategoryUseCase",
    "GetCategoryUseCase",
    "ListCategoriesForTypeUseCase",
    "ListCategoriesUseCase",
    "CreatePersonUseCase",
    "DeletePersonUseCase",
    "GetPersonUseCase",
    "ListPeopleUseCase",
    "UpdatePersonUseCase",
    "CreateTransactionUseCase",
    "DeleteTransactionUseCase",
    "GetTransactionUseCase",
    "ListRecentTransactionsUseCase",
    "ListTransactionsUseCase",
    "UpdateTransactionUseCase",
    "ValidateTransactionUseCase",
]
