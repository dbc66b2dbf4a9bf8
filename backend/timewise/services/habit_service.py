"""Habit Service: application layer between the habits router and storage.

Invariants:
    - Every call forwards to the repository unchanged (arguments and results)
    - No business rules yet; ownership checks and domain events belong here when added
"""

from typing import Sequence

from timewise.core.domain_types import HabitId, OwnerId
from timewise.core.repository_protocols import HabitRepository
from timewise.models.habit import Habit


class DefaultHabitService:
    """HabitService implementation delegating to a HabitRepository."""

    def __init__(self, repository: HabitRepository):
        self._repository = repository

    async def create(self, habit: Habit) -> Habit:
        return await self._repository.add(habit)

    async def get_by_id(self, habit_id: HabitId) -> Habit | None:
        return await self._repository.get_by_id(habit_id)

    async def get_page(
        self, page_number: int, page_size: int, owner_id: OwnerId | None = None,
    ) -> tuple[Sequence[Habit], int]:
        return await self._repository.get_page(page_number, page_size, owner_id)

    async def update(self, habit: Habit) -> None:
        await self._repository.update(habit)

    async def delete(self, habit_id: HabitId) -> None:
        await self._repository.delete(habit_id)
