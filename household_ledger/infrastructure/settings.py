"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass, field
import os

import dotenv

from household_ledger.infrastructure.logging.logger import get_app_logger
from household_ledger.utils.utils import get_project_root

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def default_database_url() -> str:
    """Return the SQLite database used when no URL is configured."""
    return f"sqlite:///{get_project_root() / 'data' / 'household.db'}"


@dataclass(frozen=True)
class HouseholdSettings:
    """Runtime settings for the household ledger.

    Attributes:
        database_url: SQLAlchemy URL of the household database.
        api_host: Interface the HTTP API binds to.
        api_port: Port the HTTP API listens on.
        cors_origins: Origins allowed to call the HTTP API.
        seed_categories: Whether default categories are created on init.
    """

    database_url: str = field(default_factory=default_database_url)
    api_host: str = "127.0.0.1"
    api_port: int = 8000
    cors_origins: tuple[str, ...] = ("http://localhost:3000",)
    seed_categories: bool = True

    @classmethod
    def from_env(cls) -> "HouseholdSettings":
        """Build settings from environment variables and a .env file.

        Returns:
            HouseholdSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        database_url = (
            os.getenv("HOUSEHOLD_DB_URL", "").strip() or default_database_url()
        )
        api_host = os.getenv("HOUSEHOLD_API_HOST", "").strip() or cls.api_host
        api_port = cls._parse_port(
            os.getenv("HOUSEHOLD_API_PORT"),
            logger=logger,
        )
        raw_origins = os.getenv("HOUSEHOLD_CORS_ORIGINS")
        cors_origins = (
            tuple(
                origin.strip()
                for origin in raw_origins.split(",")
                if origin.strip()
            )
            if raw_origins is not None
            else cls.cors_origins
        )
        seed_categories = cls._parse_flag(
            os.getenv("HOUSEHOLD_SEED_CATEGORIES"),
            default=cls.seed_categories,
            logger=logger,
        )
        return cls(
            database_url=database_url,
            api_host=api_host,
            api_port=api_port,
            cors_origins=cors_origins,
            seed_categories=seed_categories,
        )

    @staticmethod
    def _parse_port(raw_port: str | None, logger) -> int:
        """Parse the API port, falling back to the default on bad input.

        Args:
            raw_port: Raw port string.
            logger: Logger used for warnings.

        Returns:
            int: Port number.
        """
        default = HouseholdSettings.api_port
        if not raw_port or not raw_port.strip():
            return default
        try:
            port = int(raw_port.strip())
        except ValueError:
            logger.warning(f"Invalid HOUSEHOLD_API_PORT {raw_port!r}")
            return default
        if not 0 < port < 65536:
            logger.warning(f"HOUSEHOLD_API_PORT out of range: {port}")
            return default
        return port

    @staticmethod
    def _parse_flag(raw_value: str | None, default: bool, logger) -> bool:
        if raw_value is None or not raw_value.strip():
            return default
        lowered = raw_value.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
        logger.warning(f"Unrecognized boolean value {raw_value!r}")
        return default


__all__ = ["HouseholdSettings", "default_database_url"]
