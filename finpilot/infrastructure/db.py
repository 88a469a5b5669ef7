"""Database infrastructure for the finance store.

This module exposes helpers to create and reuse the SQLAlchemy engine
connected to the hosted PostgreSQL database behind the application. It
belongs to the infrastructure layer because it deals with an external
system.
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from finpilot.application.ports.database import DatabaseEnginePort


def _get_env_var(name: str) -> str:
    """Return a required setting, loading `.env` first.

    Args:
        name: Variable holding the setting.

    Returns:
        str: Non-empty value.

    Raises:
        RuntimeError: If the variable is unset or blank.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(db_url: str) -> Engine:
    """Build the pooled engine used for the finance store.

    Args:
        db_url: SQLAlchemy URL with driver and credentials.

    Returns:
        Engine: Engine with a five-connection QueuePool and pre-ping.
    """
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_finance_engine: Optional[Engine] = None


def get_finance_engine() -> Engine:
    """Get a singleton SQLAlchemy engine for the finance store.

    Returns:
        Engine: Lazily initialized engine connected to the hosted database.
    """
    global _finance_engine
    if _finance_engine is None:
        db_url = _get_env_var("FINANCE_DB_URL")
        _finance_engine = _create_engine(db_url)
    return _finance_engine


def dispose_finance_engine() -> None:
    """Dispose the cached engine and its pooled connections."""
    global _finance_engine
    if _finance_engine is not None:
        _finance_engine.dispose()
        _finance_engine = None


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by a SQLAlchemy engine.

    Use cases receive this adapter through the port and never read the
    database URL themselves.
    """

    def get_finance_engine(self) -> Engine:
        """Get the engine for the finance store.

        Returns:
            Engine: SQLAlchemy engine connected to the hosted database.
        """
        return get_finance_engine()


__all__ = [
    "get_finance_engine",
    "dispose_finance_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
