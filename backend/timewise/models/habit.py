"""Habit ORM: the single persisted entity.

Invariants:
    - id is a UUID primary key generated client-side (uuid4)
    - owner_id is never NULL; routes generate one when the caller omits it
    - type stored as the HabitType name in a bounded string column
    - created_at is set once at insert (UTC) and never updated
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Enum, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from timewise.core.domain_types import HabitType
from timewise.db.base import Base


class Habit(Base):
    """A user's recurring wellness action."""
    __tablename__ = "habits"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4,
    )
    owner_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, nullable=False, index=True, default=uuid.uuid4,
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(
        String(1000), nullable=True,
    )
    type: Mapped[HabitType] = mapped_column(
        Enum(
            HabitType, native_enum=False, length=50,
            validate_strings=True, name="habit_type",
        ),
        nullable=False,
        default=HabitType.BREAK,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    completed: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )

    def __repr__(self) -> str:
        return f"<Habit {self.id} {self.type.name} {self.title!r}>"
