"""FastAPI application exposing the household ledger over HTTP."""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from household_ledger.adapters.api.routers import categories, people, transactions
from household_ledger.application.ports.household_repository import (
    HouseholdRepositoryPort,
)
from household_ledger.domain.errors import NotFoundError, ValidationFailureError
from household_ledger.infrastructure.container import (
    build_database_adapter,
    build_household_repository,
    build_settings,
    initialize_database,
)
from household_ledger.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)
from household_ledger.infrastructure.settings import HouseholdSettings


def create_app(
    repository: HouseholdRepositoryPort | None = None,
    settings: HouseholdSettings | None = None,
    logger=None,
    usage_logger=None,
) -> FastAPI:
    """Build the API application.

    Args:
        repository: Repository serving every route. Defaults to the
            SQLAlchemy repository built from settings, whose
            schema is created on startup.
        settings: Runtime settings. Defaults to environment settings.
        logger: Optional logger for application events.
        usage_logger: Optional logger receiving one line per request.

    Returns:
        FastAPI: Configured application.
    """
    resolved_settings = settings or build_settings()
    if repository is None:
        db_adapter = build_database_adapter(resolved_settings)
        initialize_database(
            db_adapter, seed_categories=resolved_settings.seed_categories
        )
        repository = build_household_repository(db_adapter)
    app_logger = logger or get_app_logger()
    request_logger = usage_logger or get_usage_logger()

    app = FastAPI(title="Household Ledger API")
    app.state.repository = repository
    app.state.logger = app_logger
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(resolved_settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_usage(request: Request, call_next):
        response = await call_next(request)
        request_logger.info(
            f"{request.method} {request.url.path} -> {response.status_code}"
        )
        return response

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"detail": str(exc)},
        )

    @app.exception_handler(ValidationFailureError)
    async def handle_validation_failure(
        request: Request,
        exc: ValidationFailureError,
    ):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"problemas": exc.messages},
        )

    @app.exception_handler(RequestValidationError)
    async def handle_bad_request(request: Request, exc: RequestValidationError):
        problems = [
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        ]
        app_logger.warning(f"Malformed request to {request.url.path}: {problems}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"problemas": problems},
        )

    @app.get("/api/health")
    def health():
        return {"status": "ok"}

    app.include_router(people.router)
    app.include_router(categories.router)
    app.include_router(transactions.router)
    return app


__all__ = ["create_app"]
