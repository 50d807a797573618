"""Composition root for wiring infrastructure adapters."""

from household_ledger.application.ports.database import DatabaseEnginePort
from household_ledger.application.ports.household_repository import (
    HouseholdRepositoryPort,
)
from household_ledger.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from household_ledger.infrastructure.household_repository import (
    SqlAlchemyHouseholdRepository,
)
from household_ledger.infrastructure.logging.logger import get_app_logger
from household_ledger.infrastructure.schema import (
    create_schema,
    seed_default_categories,
)
from household_ledger.infrastructure.settings import HouseholdSettings


def build_settings() -> HouseholdSettings:
    """Return settings sourced from the environment."""
    return HouseholdSettings.from_env()


def build_database_adapter(
    settings: HouseholdSettings | None = None,
) -> DatabaseEnginePort:
    """Return the database adapter instance."""
    resolved = settings or build_settings()
    return SqlAlchemyDatabaseEngineAdapter(resolved.database_url)


def build_household_repository(
    db_port: DatabaseEnginePort | None = None,
) -> HouseholdRepositoryPort:
    """Return the household repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyHouseholdRepository(resolved_db)


def initialize_database(
    db_port: DatabaseEnginePort,
    seed_categories: bool = True,
) -> int:
    """Create the schema and optionally seed default categories.

    Args:
        db_port: Port providing the household engine.
        seed_categories: Whether to insert the default categories.

    Returns:
        int: Number of categories seeded.
    """
    engine = db_port.get_engine()
    create_schema(engine)
    seeded = seed_default_categories(engine) if seed_categories else 0
    get_app_logger().info(f"Database schema ready, seeded {seeded} categories")
    return seeded


__all__ = [
    "build_settings",
    "build_database_adapter",
    "build_household_repository",
    "initialize_database",
]
