"""Habit Repository: SQLAlchemy implementation of the HabitRepository protocol.

Invariants:
    - Each operation runs in its own session (one unit of work per call)
    - get_page: owner filter → created_at DESC, id DESC → OFFSET/LIMIT; total counted separately
    - delete of an absent id is a no-op; existence checks belong to the caller
    - Every SQLAlchemyError leaves as PersistenceError / SchemaNotInitializedError
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Sequence

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from timewise.core.domain_types import HabitId, OwnerId
from timewise.core.pagination import page_offset
from timewise.infrastructure.database import (
    DatabaseSessionManager, translate_db_error,
)
from timewise.models.habit import Habit

logger = logging.getLogger(__name__)


class SqlAlchemyHabitRepository:
    """Storage gateway for the habits table."""

    def __init__(self, db: DatabaseSessionManager):
        self._db = db

    @asynccontextmanager
    async def _unit_of_work(
        self, operation: str,
    ) -> AsyncGenerator[AsyncSession, None]:
        try:
            async with self._db.session() as session:
                yield session
        except SQLAlchemyError as e:
            error = translate_db_error(e, operation)
            logger.error(
                f"Habit {operation} failed: {error.inner_message}",
                extra={"error_code": error.code},
            )
            raise error from e

    async def add(self, habit: Habit) -> Habit:
        async with self._unit_of_work("insert") as session:
            session.add(habit)
            await session.commit()
            await session.refresh(habit)
        return habit

    async def get_by_id(self, habit_id: HabitId) -> Habit | None:
        async with self._unit_of_work("select") as session:
            return await session.get(Habit, habit_id)

    async def get_page(
        self, page_number: int, page_size: int, owner_id: OwnerId | None = None,
    ) -> tuple[Sequence[Habit], int]:
        query = select(Habit)
        count_query = select(func.count()).select_from(Habit)
        if owner_id is not None:
            query = query.where(Habit.owner_id == owner_id)
            count_query = count_query.where(Habit.owner_id == owner_id)
        query = (
            query.order_by(Habit.created_at.desc(), Habit.id.desc())
            .offset(page_offset(page_number, page_size))
            .limit(page_size)
        )

        async with self._unit_of_work("select") as session:
            total = await session.scalar(count_query) or 0
            items = (await session.scalars(query)).all()
        return items, total

    async def update(self, habit: Habit) -> None:
        """Persist all mutable fields of a previously fetched habit."""
        async with self._unit_of_work("update") as session:
            await session.merge(habit)
            await session.commit()

    async def delete(self, habit_id: HabitId) -> None:
        async with self._unit_of_work("delete") as session:
            found = await session.get(Habit, habit_id)
            if found is None:
                return
            await session.delete(found)
            await session.commit()
