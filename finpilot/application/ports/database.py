"""Database ports for the finance store.

This module defines the application-layer protocol for accessing the hosted
PostgreSQL database. Infrastructure implementations provide the concrete
adapter.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the engine connected to the finance store."""

    def get_finance_engine(self) -> Engine:
        """Get the engine for the finance store.

        Returns:
            Engine: SQLAlchemy engine connected to the hosted database.
        """


__all__ = ["DatabaseEnginePort"]
