"""API test fixtures: fully wired app over an in-memory database + httpx client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - The app is built with create_app(), same wiring as production
"""

from uuid import uuid4

import pytest
from httpx import ASGITransport, AsyncClient

from timewise.main import create_app

HABITS_URL = "/api/v1/habits"


async def _client_for(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def client(test_settings, db_manager):
    """Client for an app whose database has the habits table."""
    app = create_app(test_settings, db_manager=db_manager)
    async for c in _client_for(app):
        yield c


@pytest.fixture
async def unmigrated_client(test_settings, bare_db_manager):
    """Client for an app whose database was never migrated."""
    app = create_app(test_settings, db_manager=bare_db_manager)
    async for c in _client_for(app):
        yield c


@pytest.fixture
def create_habit(client):
    """POST a habit and return the decoded 201 body."""

    async def _create(**overrides) -> dict:
        payload = {
            "ownerId": str(uuid4()),
            "title": "Stretch legs",
            "description": "Stand up and stretch",
            "type": "BREAK",
        }
        payload.update(overrides)
        res = await client.post(HABITS_URL, json=payload)
        assert res.status_code == 201, res.text
        return res.json()

    return _create
