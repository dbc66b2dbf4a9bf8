"""Habit schemas: boundary validation and camelCase wire format.

Invariants:
    - title max 200 chars, description max 1000 chars
    - Payloads accept camelCase keys; dumps by alias are camelCase
    - createdAt always UTC, naive values treated as UTC
"""

from datetime import datetime, timezone
from uuid import uuid4

import pytest
from pydantic import ValidationError

from timewise.core.domain_types import HabitType
from timewise.models.habit import Habit
from timewise.schemas.habit import HabitCreate, HabitPage, HabitRead, HabitUpdate


def test_create_accepts_camel_case_owner():
    owner = uuid4()
    body = HabitCreate.model_validate(
        {"ownerId": str(owner), "title": "Stretch", "type": "BREAK"},
    )
    assert body.owner_id == owner
    assert body.description is None


def test_create_owner_is_optional():
    body = HabitCreate.model_validate({"title": "Drink", "type": "hydration"})
    assert body.owner_id is None


def test_title_max_length_enforced():
    with pytest.raises(ValidationError):
        HabitCreate(title="x" * 201, type="BREAK")


def test_description_max_length_enforced():
    with pytest.raises(ValidationError):
        HabitCreate(title="ok", description="x" * 1001, type="BREAK")


def test_type_length_left_to_type_parsing():
    body = HabitCreate(title="ok", type="Z" * 51)
    assert body.type == "Z" * 51


def test_title_and_type_required():
    with pytest.raises(ValidationError):
        HabitCreate.model_validate({"type": "BREAK"})
    with pytest.raises(ValidationError):
        HabitCreate.model_validate({"title": "ok"})


def test_update_completed_defaults_false():
    body = HabitUpdate.model_validate({"title": "Sit up", "type": "POSTURE"})
    assert body.completed is False
    assert body.owner_id is None


def test_read_from_habit_serializes_camel_case():
    habit = Habit(
        id=uuid4(), owner_id=uuid4(), title="Walk", description=None,
        type=HabitType.BREAK, completed=False,
        created_at=datetime(2025, 1, 1, 12, 0),
    )
    data = HabitRead.from_habit(habit).model_dump(by_alias=True, mode="json")
    assert set(data) == {
        "id", "ownerId", "title", "description", "type",
        "createdAt", "completed", "links",
    }
    assert data["type"] == "BREAK"
    assert data["createdAt"] == "2025-01-01T12:00:00Z"
    assert [link["rel"] for link in data["links"]] == ["self", "update", "delete"]


def test_read_converts_aware_datetimes_to_utc():
    from datetime import timedelta
    plus_three = timezone(timedelta(hours=3))
    read = HabitRead(
        id=uuid4(), owner_id=uuid4(), title="t", description=None,
        type="BREAK", completed=True,
        created_at=datetime(2025, 1, 1, 15, 0, tzinfo=plus_three),
    )
    assert read.created_at == datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)
    assert read.created_at.utcoffset() == timedelta(0)


def test_page_dumps_camel_case():
    page = HabitPage(items=[], total_count=0, page_number=1, page_size=10, total_pages=0)
    assert page.model_dump(by_alias=True) == {
        "items": [], "totalCount": 0, "pageNumber": 1, "pageSize": 10, "totalPages": 0,
    }
