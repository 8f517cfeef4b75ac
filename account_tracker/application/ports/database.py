"""Database port for the account tracker.

Infrastructure implementations provide the concrete SQLAlchemy engine; the
store adapters depend only on this protocol.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the engine of the tracker database."""

    def get_engine(self) -> Engine:
        """Get the engine for the tracker database.

        Returns:
            Engine: SQLAlchemy engine connected to the tracker store.
        """


__all__ = ["DatabaseEnginePort"]
