"""Root conftest: shared test configuration and database fixtures."""

import os

import pytest

# Ensure tests never reach a real database
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")

from timewise.config import Settings  # noqa: E402
from timewise.infrastructure.database import DatabaseSessionManager  # noqa: E402

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def test_settings() -> Settings:
    return Settings(database_url=TEST_DATABASE_URL, log_format="text")


@pytest.fixture
async def bare_db_manager():
    """In-memory database with NO tables (migrations never applied)."""
    manager = DatabaseSessionManager(TEST_DATABASE_URL)
    yield manager
    await manager.dispose()


@pytest.fixture
async def db_manager():
    """Fresh in-memory database with the habits table created."""
    manager = DatabaseSessionManager(TEST_DATABASE_URL)
    await manager.create_schema()
    yield manager
    await manager.drop_schema()
    await manager.dispose()
