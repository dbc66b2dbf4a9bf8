"""TimeWise API: FastAPI application factory and ASGI entry point.

Invariants:
    - create_app() wires everything explicitly: session manager → repository →
      service → router. No global container, no per-request lookup
    - Global error handlers map TimeWiseError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Engine disposed on shutdown via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - db_manager injectable so tests can hand in an in-memory SQLite manager
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from timewise.api.error_handlers import register_error_handlers
from timewise.api.routes.habits import build_habits_router
from timewise.config import Settings, get_settings
from timewise.infrastructure.database import DatabaseSessionManager
from timewise.infrastructure.habit_repository import SqlAlchemyHabitRepository
from timewise.infrastructure.observability import setup_logging
from timewise.services.habit_service import DefaultHabitService

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    db_manager: DatabaseSessionManager | None = None,
) -> FastAPI:
    """Build a fully wired TimeWise application."""
    settings = settings or get_settings()
    db_manager = db_manager or DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )

    repository = SqlAlchemyHabitRepository(db_manager)
    service = DefaultHabitService(repository)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        if settings.auto_create_schema:
            await db_manager.create_schema()
        logger.info("TimeWise API started")
        yield
        await db_manager.dispose()
        logger.info("TimeWise API shutting down")

    app = FastAPI(title="TimeWise API", version="1.0.0", lifespan=lifespan)

    register_error_handlers(app, expose_details=settings.expose_error_details)

    # CORS added after the catch-all so it wraps error responses too
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Location", "X-Total-Count"],
    )

    app.include_router(build_habits_router(service, settings.api_version))
    return app


app = create_app()
