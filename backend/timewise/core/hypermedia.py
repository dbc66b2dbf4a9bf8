"""Hypermedia Links: maps (habit id, API version) to the canonical resource URLs.

Invariants:
    - Always three links, in order: self/GET, update/PUT, delete/DELETE
    - All three point at /api/{version}/habits/{id}
    - Pure function of its inputs: no request or router state
"""

from typing import TypedDict
from uuid import UUID

DEFAULT_API_VERSION = "v1"


class Link(TypedDict):
    rel: str
    href: str
    method: str


def habit_location(habit_id: UUID, version: str = DEFAULT_API_VERSION) -> str:
    return f"/api/{version}/habits/{habit_id}"


def build_habit_links(
    habit_id: UUID, version: str = DEFAULT_API_VERSION,
) -> list[Link]:
    href = habit_location(habit_id, version)
    return [
        Link(rel="self", href=href, method="GET"),
        Link(rel="update", href=href, method="PUT"),
        Link(rel="delete", href=href, method="DELETE"),
    ]
