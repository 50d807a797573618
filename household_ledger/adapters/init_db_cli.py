"""CLI adapter to create the household schema and seed categories."""

from household_ledger.infrastructure.container import (
    build_database_adapter,
    build_settings,
    initialize_database,
)
from household_ledger.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Create tables and, when configured, the default categories."""
    logger = get_app_logger()
    settings = build_settings()
    db_adapter = build_database_adapter(settings)

    seeded = initialize_database(
        db_adapter,
        seed_categories=settings.seed_categories,
    )

    logger.info(f"Household database initialized at {settings.database_url}")
    print(f"Database ready. Seeded {seeded} default categories.")


if __name__ == "__main__":  # pragma: no cover
    main()
