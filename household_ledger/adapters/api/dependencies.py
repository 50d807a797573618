"""FastAPI dependencies shared by the routers."""

from fastapi import Request

from household_ledger.application.ports.household_repository import (
    HouseholdRepositoryPort,
)


def get_repository(request: Request) -> HouseholdRepositoryPort:
    """Return the repository attached to the running application."""
    return request.app.state.repository


def get_logger(request: Request):
    """Return the application logger attached to the running application."""
    return request.app.state.logger


__all__ = ["get_repository", "get_logger"]
