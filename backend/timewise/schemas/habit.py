"""Habit Schemas: camelCase wire contracts for the habits endpoints.

Invariants:
    - title ≤ 200 chars, description ≤ 1000 chars (enforced at the boundary)
    - type travels as a plain string; routes parse it with parse_habit_type
    - createdAt is always serialized as UTC
    - ownerId is optional on create (generated when absent) and informational on update

Design Decisions:
    - alias_generator=to_camel + populate_by_name: snake_case in Python, camelCase on the wire
    - Blank-title and type checks live in the routes so they can raise HabitValidationError
      with the shared error envelope
"""

from datetime import datetime, timezone
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from timewise.core.hypermedia import DEFAULT_API_VERSION, build_habit_links
from timewise.models.habit import Habit

TITLE_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 1000


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class HabitCreate(_CamelModel):
    """Habit creation payload."""
    owner_id: UUID | None = None
    title: str = Field(max_length=TITLE_MAX_LENGTH)
    description: str | None = Field(None, max_length=DESCRIPTION_MAX_LENGTH)
    type: str


class HabitUpdate(_CamelModel):
    """Full replacement of a habit's mutable fields."""
    owner_id: UUID | None = None
    title: str = Field(max_length=TITLE_MAX_LENGTH)
    description: str | None = Field(None, max_length=DESCRIPTION_MAX_LENGTH)
    type: str
    completed: bool = False


class HabitLink(BaseModel):
    rel: str
    href: str
    method: str


class HabitRead(_CamelModel):
    """Habit resource with hypermedia links."""
    id: UUID
    owner_id: UUID
    title: str
    description: str | None
    type: str
    created_at: datetime
    completed: bool
    links: list[HabitLink] = []

    @field_validator("created_at")
    @classmethod
    def ensure_utc(cls, v: datetime) -> datetime:
        # SQLite hands back naive datetimes; every stored value is UTC
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)

    @classmethod
    def from_habit(
        cls, habit: Habit, version: str = DEFAULT_API_VERSION,
    ) -> "HabitRead":
        return cls(
            id=habit.id,
            owner_id=habit.owner_id,
            title=habit.title,
            description=habit.description,
            type=habit.type.name,
            created_at=habit.created_at,
            completed=habit.completed,
            links=[HabitLink(**link) for link in build_habit_links(habit.id, version)],
        )


class HabitPage(_CamelModel):
    """One page of habits plus the size of the filtered set."""
    items: list[HabitRead]
    total_count: int
    page_number: int
    page_size: int
    total_pages: int
