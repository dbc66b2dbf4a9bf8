"""Database Session Manager: async engine, per-operation sessions, driver-error translation.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - Every session is closed on exit, including on cancellation
    - All SQLAlchemy exceptions leave this module as PersistenceError
      (SchemaNotInitializedError when the table is missing)

Design Decisions:
    - One manager per app, built by create_app() and passed down explicitly
    - expire_on_commit=False: entities stay readable after their session closes
    - In-memory SQLite uses StaticPool so every session sees the same database
"""

import logging
import re
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)
from sqlalchemy.pool import StaticPool

from timewise.core.errors import PersistenceError, SchemaNotInitializedError
from timewise.db.base import Base
import timewise.models  # noqa: F401  (populates Base.metadata)

logger = logging.getLogger(__name__)

# Driver exception classes raised for a missing relation (asyncpg, psycopg)
_MISSING_TABLE_ERROR_TYPES = frozenset({"UndefinedTableError", "UndefinedTable"})
# Fallback markers for drivers without a dedicated class (sqlite, oracle)
_MISSING_TABLE_MARKERS = (
    "no such table",
    "ora-00942",
    "table or view does not exist",
)
# Postgres message without a driver class; "column ... of relation" must not match
_MISSING_RELATION = re.compile(r'(?:^|: )relation "[^"]+" does not exist')


def is_missing_table_error(exc: BaseException) -> bool:
    """True when a driver error says the target table/relation does not exist."""
    orig = getattr(exc, "orig", None) or exc
    if type(orig).__name__ in _MISSING_TABLE_ERROR_TYPES:
        return True
    # asyncpg errors arrive wrapped by the SQLAlchemy adapter
    cause = getattr(orig, "__cause__", None)
    if cause is not None and type(cause).__name__ in _MISSING_TABLE_ERROR_TYPES:
        return True
    text = str(orig).lower()
    if any(marker in text for marker in _MISSING_TABLE_MARKERS):
        return True
    return _MISSING_RELATION.search(text) is not None


def translate_db_error(exc: SQLAlchemyError, operation: str) -> PersistenceError:
    """Map a SQLAlchemy exception to the storage error taxonomy."""
    inner = str(getattr(exc, "orig", None) or exc)
    if is_missing_table_error(exc):
        return SchemaNotInitializedError(operation, inner)
    if isinstance(exc, DBAPIError) and exc.connection_invalidated:
        return PersistenceError(f"{operation} (connection lost)", inner)
    return PersistenceError(operation, inner)


class DatabaseSessionManager:
    """Owns the async engine and hands out sessions with rollback on failure."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        if database_url.startswith("sqlite"):
            engine_kwargs: dict = {}
            if ":memory:" in database_url or database_url.endswith("://"):
                engine_kwargs["poolclass"] = StaticPool
        else:
            engine_kwargs = {
                "pool_size": pool_size,
                "max_overflow": max_overflow,
                "pool_pre_ping": True,
                "pool_recycle": 3600,
            }
        self.engine = create_async_engine(database_url, **engine_kwargs)
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide a session that rolls back on any exception."""
        session = self._session_factory()
        try:
            yield session
        except BaseException:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def create_schema(self) -> None:
        """Create all tables known to Base.metadata (tests, local development)."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database schema ensured")

    async def drop_schema(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    async def dispose(self) -> None:
        await self.engine.dispose()
