"""Database infrastructure for the account tracker.

This module exposes helpers to create and reuse the SQLAlchemy engine of the
transaction store. SQLite (the default) gets its data directory created on
demand; other URLs get a small pooled engine with health checks.
"""

from pathlib import Path
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import QueuePool

from account_tracker.application.ports.database import DatabaseEnginePort
from account_tracker.infrastructure.settings import TrackerSettings


def _ensure_sqlite_directory(db_url: str) -> None:
    """Create the parent directory of a file-based SQLite database."""
    url = make_url(db_url)
    if url.database and url.database != ":memory:":
        Path(url.database).expanduser().parent.mkdir(
            parents=True,
            exist_ok=True,
        )


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine.

    Args:
        db_url: Fully qualified database URL.

    Returns:
        Engine: SQLite engine usable across Streamlit threads, or a pooled
        engine with health checks for server databases.
    """
    if make_url(db_url).get_backend_name() == "sqlite":
        _ensure_sqlite_directory(db_url)
        return create_engine(
            db_url,
            connect_args={"check_same_thread": False},
            future=True,
        )
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_engine: Optional[Engine] = None


def get_engine() -> Engine:
    """Get a singleton SQLAlchemy engine for the configured store.

    Returns:
        Engine: Lazily initialized engine from ``TRACKER_DB_URL``.
    """
    global _engine
    if _engine is None:
        settings = TrackerSettings.from_env()
        _engine = _create_engine(settings.db_url)
    return _engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by SQLAlchemy engines.

    Without an explicit URL the adapter shares the module-level engine
    configured from the environment.
    """

    def __init__(self, db_url: str | None = None) -> None:
        self._db_url = db_url
        self._engine: Optional[Engine] = None

    def get_engine(self) -> Engine:
        """Get the engine for the tracker database.

        Returns:
            Engine: SQLAlchemy engine connected to the store.
        """
        if self._db_url is None:
            return get_engine()
        if self._engine is None:
            self._engine = _create_engine(self._db_url)
        return self._engine


__all__ = ["get_engine", "SqlAlchemyDatabaseEngineAdapter"]
