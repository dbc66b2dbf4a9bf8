"""Domain Types: identity aliases and the habit type enumeration.

Invariants:
    - HabitId and OwnerId wrap UUIDs
    - HabitType is closed: BREAK, POSTURE, HYDRATION (value == name, persisted as text)
    - parse_habit_type never raises; unknown names yield a HabitTypeParseFailure

Design Decisions:
    - str Enum: serializes to JSON and to the text column without custom encoders
    - Parse failure is a value, not an exception: callers choose the HTTP mapping
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

HabitId = NewType("HabitId", UUID)
OwnerId = NewType("OwnerId", UUID)


# ─── Enums ───────────────────────────────────────────────────────

class HabitType(str, Enum):
    """Kinds of wellness habit tracked by the API."""
    BREAK = "BREAK"
    POSTURE = "POSTURE"
    HYDRATION = "HYDRATION"

    @classmethod
    def names(cls) -> list[str]:
        return [member.name for member in cls]


@dataclass(frozen=True)
class HabitTypeParseFailure:
    """Result of parsing an unknown habit type name."""
    raw: str | None
    accepted: tuple[str, ...]

    @property
    def message(self) -> str:
        return f"Invalid type. Accepted values: {', '.join(self.accepted)}"


def parse_habit_type(raw: str | None) -> HabitType | HabitTypeParseFailure:
    """Case-insensitive name lookup. 'hydration', ' Break ' and 'POSTURE' all match."""
    if raw is not None:
        candidate = raw.strip().upper()
        for member in HabitType:
            if member.name == candidate:
                return member
    return HabitTypeParseFailure(raw=raw, accepted=tuple(HabitType.names()))
