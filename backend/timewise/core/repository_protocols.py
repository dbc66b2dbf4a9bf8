"""Boundary Protocols: contracts between the HTTP shell, the service and storage.

Invariants:
    - Routes depend on HabitService only; the service depends on HabitRepository only
    - Absence is a value (None), not an exception, at both layers
    - get_page returns (items, total_count) where total_count ignores pagination

Design Decisions:
    - Protocol over ABC: structural subtyping, fakes in tests need no inheritance
    - Async in Protocol: implementations do IO
"""

from typing import Protocol, Sequence

from timewise.core.domain_types import HabitId, OwnerId
from timewise.models.habit import Habit


class HabitRepository(Protocol):
    """Contract for habit persistence: implemented by infrastructure."""
    async def add(self, habit: Habit) -> Habit: ...
    async def get_by_id(self, habit_id: HabitId) -> Habit | None: ...
    async def get_page(
        self, page_number: int, page_size: int, owner_id: OwnerId | None = None,
    ) -> tuple[Sequence[Habit], int]: ...
    async def update(self, habit: Habit) -> None: ...
    async def delete(self, habit_id: HabitId) -> None: ...


class HabitService(Protocol):
    """Contract for the application layer consumed by the habits router."""
    async def create(self, habit: Habit) -> Habit: ...
    async def get_by_id(self, habit_id: HabitId) -> Habit | None: ...
    async def get_page(
        self, page_number: int, page_size: int, owner_id: OwnerId | None = None,
    ) -> tuple[Sequence[Habit], int]: ...
    async def update(self, habit: Habit) -> None: ...
    async def delete(self, habit_id: HabitId) -> None: ...
