"""Habits Routes: CRUD + paged listing for the Habit resource.

Invariants:
    - Routes talk to the HabitService only (injected by build_habits_router)
    - Blank titles and unknown types raise HabitValidationError (400) before any write
    - Missing habits raise HabitNotFoundError (bare 404) for get/update/delete
    - pageSize clamped into [1, 50]; pageNumber below 1 treated as 1,
      above MAX_PAGE_NUMBER rejected with 400
    - List responses carry X-Total-Count; create responses carry Location

Design Decisions:
    - Router factory over module-level router + Depends: the service is wired once
      at startup in create_app(), no per-request container lookup
    - ownerId on update is accepted but ignored: owner is immutable after creation
"""

import logging
from uuid import UUID, uuid4

from fastapi import APIRouter, Query, Response, status

from timewise.core.domain_types import (
    HabitId, HabitType, OwnerId, parse_habit_type,
)
from timewise.core.errors import HabitNotFoundError, HabitValidationError
from timewise.core.hypermedia import DEFAULT_API_VERSION, habit_location
from timewise.core.pagination import (
    DEFAULT_PAGE_NUMBER, DEFAULT_PAGE_SIZE, MAX_PAGE_NUMBER,
    clamp_page_size, normalize_page_number, total_pages,
)
from timewise.core.repository_protocols import HabitService
from timewise.models.habit import Habit
from timewise.schemas.habit import HabitCreate, HabitPage, HabitRead, HabitUpdate

logger = logging.getLogger(__name__)

TOTAL_COUNT_HEADER = "X-Total-Count"


def _require_title(title: str) -> None:
    if not title.strip():
        raise HabitValidationError("Title is required", "title")


def _require_type(raw: str) -> HabitType:
    parsed = parse_habit_type(raw)
    if not isinstance(parsed, HabitType):
        raise HabitValidationError(parsed.message, "type")
    return parsed


def build_habits_router(
    service: HabitService, api_version: str = DEFAULT_API_VERSION,
) -> APIRouter:
    """Build the /api/{version}/habits router bound to one service instance."""
    router = APIRouter(prefix=f"/api/{api_version}/habits", tags=["habits"])

    async def get_habit_or_404(habit_id: UUID) -> Habit:
        habit = await service.get_by_id(HabitId(habit_id))
        if habit is None:
            raise HabitNotFoundError(habit_id)
        return habit

    @router.post(
        "", response_model=HabitRead, status_code=status.HTTP_201_CREATED,
    )
    async def create_habit(body: HabitCreate, response: Response):
        """Create a habit. ownerId is generated when omitted."""
        _require_title(body.title)
        habit_type = _require_type(body.type)

        habit = Habit(
            id=HabitId(uuid4()),
            owner_id=OwnerId(body.owner_id or uuid4()),
            title=body.title,
            description=body.description,
            type=habit_type,
            completed=False,
        )
        created = await service.create(habit)
        logger.info(
            f"Habit created {created.id}",
            extra={"habit_id": created.id, "owner_id": created.owner_id},
        )

        response.headers["Location"] = habit_location(created.id, api_version)
        return HabitRead.from_habit(created, api_version)

    @router.get("/{habit_id}", response_model=HabitRead)
    async def get_habit(habit_id: UUID):
        """Get one habit with its hypermedia links."""
        habit = await get_habit_or_404(habit_id)
        return HabitRead.from_habit(habit, api_version)

    @router.get("", response_model=HabitPage)
    async def list_habits(
        response: Response,
        owner_id: UUID | None = Query(None, alias="ownerId"),
        page_number: int = Query(
            DEFAULT_PAGE_NUMBER, alias="pageNumber", le=MAX_PAGE_NUMBER,
        ),
        page_size: int = Query(DEFAULT_PAGE_SIZE, alias="pageSize"),
    ):
        """List habits newest first, optionally filtered by owner."""
        page_number = normalize_page_number(page_number)
        page_size = clamp_page_size(page_size)
        items, total = await service.get_page(
            page_number, page_size, OwnerId(owner_id) if owner_id is not None else None,
        )

        response.headers[TOTAL_COUNT_HEADER] = str(total)
        return HabitPage(
            items=[HabitRead.from_habit(h, api_version) for h in items],
            total_count=total,
            page_number=page_number,
            page_size=page_size,
            total_pages=total_pages(total, page_size),
        )

    @router.put(
        "/{habit_id}",
        status_code=status.HTTP_204_NO_CONTENT,
        response_class=Response,
    )
    async def update_habit(habit_id: UUID, body: HabitUpdate):
        """Replace title, description, type and completed on an existing habit."""
        existing = await get_habit_or_404(habit_id)
        _require_title(body.title)
        habit_type = _require_type(body.type)

        existing.title = body.title
        existing.description = body.description
        existing.type = habit_type
        existing.completed = body.completed

        await service.update(existing)
        logger.info(f"Habit updated {habit_id}", extra={"habit_id": habit_id})
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @router.delete(
        "/{habit_id}",
        status_code=status.HTTP_204_NO_CONTENT,
        response_class=Response,
    )
    async def delete_habit(habit_id: UUID):
        """Hard-delete a habit."""
        await get_habit_or_404(habit_id)
        await service.delete(HabitId(habit_id))
        logger.info(f"Habit deleted {habit_id}", extra={"habit_id": habit_id})
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
