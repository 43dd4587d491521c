"""Engine plumbing shared by the ledger repository and the rate cache.

One pooled engine is built lazily from ``LEDGER_DB_URL`` and reused by every
adapter. A missing URL surfaces as ``RuntimeError`` on first use, not at
import time.
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort


def _get_env_var(name: str) -> str:
    """Return a required setting, loading ``.env`` first.

    Args:
        name: Environment variable holding the setting.

    Returns:
        str: Non-empty value.

    Raises:
        RuntimeError: If the environment variable is missing or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(db_url: str) -> Engine:
    """Build the pooled engine used for ledger reads and rate cache writes.

    Args:
        db_url: SQLAlchemy URL of the ledger database.

    Returns:
        Engine: Engine with a small pool and pre-ping so stale connections
        are replaced transparently.
    """
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_ledger_engine: Optional[Engine] = None


def get_ledger_engine() -> Engine:
    """Return the process-wide ledger engine, creating it on first call.

    Raises:
        RuntimeError: If ``LEDGER_DB_URL`` is not configured.
    """
    global _ledger_engine
    if _ledger_engine is None:
        db_url = _get_env_var("LEDGER_DB_URL")
        _ledger_engine = _create_engine(db_url)
    return _ledger_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """Hands the shared ledger engine to repositories and caches."""

    def get_ledger_engine(self) -> Engine:
        return get_ledger_engine()


__all__ = ["get_ledger_engine", "SqlAlchemyDatabaseEngineAdapter"]
