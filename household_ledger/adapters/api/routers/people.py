"""Routes under /api/pessoas."""

from fastapi import APIRouter, Depends, status

from household_ledger.adapters.api.dependencies import get_logger, get_repository
from household_ledger.adapters.api.schemas import PersonIn
from household_ledger.adapters.presenters import (
    person_deletion_payload,
    person_overview_payload,
    person_payload,
    person_totals_payload,
)
from household_ledger.application.use_cases.get_totals_reports import (
    GetPersonTotalsUseCase,
)
from household_ledger.application.use_cases.manage_people import (
    CreatePersonUseCase,
    DeletePersonUseCase,
    GetPersonUseCase,
    ListPeopleUseCase,
    UpdatePersonUseCase,
)

router = APIRouter(prefix="/api/pessoas", tags=["pessoas"])


@router.get("")
def list_people(repository=Depends(get_repository), logger=Depends(get_logger)):
    overviews = ListPeopleUseCase(repository, logger=logger).execute()
    return [person_overview_payload(item) for item in overviews]


# Declared before "/{person_id}" so the literal segment wins.
@router.get("/relatorio-totais")
def person_totals(repository=Depends(get_repository), logger=Depends(get_logger)):
    report = GetPersonTotalsUseCase(repository, logger=logger).execute()
    return person_totals_payload(report)


@router.get("/{person_id}")
def get_person(
    person_id: int,
    repository=Depends(get_repository),
    logger=Depends(get_logger),
):
    overview = GetPersonUseCase(repository, logger=logger).execute(person_id)
    return person_overview_payload(overview)


@router.post("", status_code=status.HTTP_201_CREATED)
def create_person(
    payload: PersonIn,
    repository=Depends(get_repository),
    logger=Depends(get_logger),
):
    person = CreatePersonUseCase(repository, logger=logger).execute(
        payload.name,
        payload.age,
    )
    return person_payload(person)


@router.put("/{person_id}")
def update_person(
    person_id: int,
    payload: PersonIn,
    repository=Depends(get_repository),
    logger=Depends(get_logger),
):
    overview = UpdatePersonUseCase(repository, logger=logger).execute(
        person_id,
        payload.name,
        payload.age,
    )
    return person_overview_payload(overview)


@router.delete("/{person_id}")
def delete_person(
    person_id: int,
    repository=Depends(get_repository),
    logger=Depends(get_logger),
):
    summary = DeletePersonUseCase(repository, logger=logger).execute(person_id)
    return person_deletion_payload(summary)


__all__ = ["router"]
