"""Database infrastructure for the household ledger.

This module exposes concrete helpers to create and reuse the SQLAlchemy
engine connected to the household database. It belongs to the
infrastructure layer because it deals with external systems.
"""

import os
from pathlib import Path
from typing import Optional

import dotenv
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import QueuePool

from household_ledger.application.ports.database import DatabaseEnginePort
from household_ledger.infrastructure.settings import default_database_url


def _get_env_var(name: str, default: str | None = None) -> str:
    """Read an environment variable or raise a descriptive error.

    Args:
        name: Name of the environment variable to read.
        default: Value used when the variable is missing or empty.

    Returns:
        str: The raw value of the environment variable.

    Raises:
        RuntimeError: If the variable is missing and no default is given.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if value:
        return value
    if default is not None:
        return default
    raise RuntimeError(f"Missing environment variable: {name}")


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine.

    SQLite engines get foreign key enforcement switched on for every
    connection, which the cascade and restrict rules rely on.

    Args:
        db_url: Fully qualified database URL (including driver and credentials)

    Returns:
        Engine: A SQLAlchemy engine instance with a small connection pool and
        health checks enabled.
    """
    url = make_url(db_url)
    if url.get_backend_name() == "sqlite":
        _ensure_sqlite_directory(url.database)
    engine = create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )
    if url.get_backend_name() == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def _enable_sqlite_foreign_keys(dbapi_connection, _connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def _ensure_sqlite_directory(database: str | None) -> None:
    if not database or database == ":memory:":
        return
    Path(database).expanduser().parent.mkdir(parents=True, exist_ok=True)


_engines: dict[str, Engine] = {}


def get_engine(db_url: Optional[str] = None) -> Engine:
    """Get the shared SQLAlchemy engine for a database URL.

    Engines are cached per URL for the life of the process, so callers
    asking for the same database reuse one connection pool.

    Args:
        db_url: Database URL. Defaults to HOUSEHOLD_DB_URL or the default
            SQLite file.

    Returns:
        Engine: Lazily initialized engine.
    """
    resolved = db_url or _get_env_var("HOUSEHOLD_DB_URL", default_database_url())
    engine = _engines.get(resolved)
    if engine is None:
        engine = _create_engine(resolved)
        _engines[resolved] = engine
    return engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by a SQLAlchemy engine.

    The adapter hides configuration details (environment variables, pooling)
    behind the port. Adapters built for the same URL share
    one cached engine.
    """

    def __init__(self, db_url: str | None = None) -> None:
        self._db_url = db_url

    def get_engine(self) -> Engine:
        """Get the engine for the household database.

        Returns:
            Engine: SQLAlchemy engine connected to the household database.
        """
        return get_engine(self._db_url)


__all__ = ["get_engine", "SqlAlchemyDatabaseEngineAdapter"]
