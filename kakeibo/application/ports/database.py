"""Database port for the kakeibo persistence layer.

This module defines the application-layer protocol for accessing the
database engine. Infrastructure implementations are expected to provide
concrete adapters that satisfy this port.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the engine of the household finance database."""

    def get_engine(self) -> Engine:
        """Get the engine for the household finance database.

        Returns:
            Engine: SQLAlchemy engine connected to the finance backend.
        """


__all__ = ["DatabaseEnginePort"]
