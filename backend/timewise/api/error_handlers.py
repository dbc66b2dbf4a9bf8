"""Error Handlers: global exception translation for the TimeWise API.

Invariants:
    - TimeWiseError → its http_status with the {error, message, details, innerException} envelope
      (HabitNotFoundError → bare 404)
    - SQLAlchemyError that escaped the repository → translated like PersistenceError (400)
    - RequestValidationError → 400 with field-level details
    - Anything else → 500 via the catch-all middleware, same envelope
    - asyncio.CancelledError is never caught (BaseException)

Design Decisions:
    - Domain errors use FastAPI exception handlers; the catch-all is an HTTP middleware
      so the 500 response is produced in one place and the exception does not re-raise
      through the server error middleware
    - expose_details=False keeps the 500 shape but drops exception text
"""

import logging

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from timewise.core.errors import TimeWiseError
from timewise.infrastructure.database import translate_db_error

logger = logging.getLogger(__name__)

UNHANDLED_ERROR_TITLE = "An error occurred while processing the request"
GENERIC_ERROR_MESSAGE = "An unexpected error occurred"


def register_error_handlers(app: FastAPI, expose_details: bool = True) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_timewise_error_handler(app)
    _register_database_error_handler(app)
    _register_validation_error_handler(app)
    _register_catch_all_middleware(app, expose_details)


def _timewise_error_response(request: Request, exc: TimeWiseError) -> Response:
    log = logger.warning if exc.http_status < 500 else logger.error
    log(
        f"{type(exc).__name__}: {exc.message}",
        extra={"error_code": exc.code, "path": request.url.path},
    )
    body = exc.to_response()
    if body is None:
        return Response(status_code=exc.http_status)
    return JSONResponse(status_code=exc.http_status, content=body)


def _register_timewise_error_handler(app: FastAPI) -> None:
    """Register TimeWise domain/storage error handler."""

    @app.exception_handler(TimeWiseError)
    async def timewise_error_handler(request: Request, exc: TimeWiseError):
        return _timewise_error_response(request, exc)


def _register_database_error_handler(app: FastAPI) -> None:
    """Register handler for raw SQLAlchemy errors raised outside the repository."""

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError):
        return _timewise_error_response(request, translate_db_error(exc, "request"))


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=build_validation_error_response(exc),
        )


def _register_catch_all_middleware(app: FastAPI, expose_details: bool) -> None:
    """Register the middleware that turns any uncaught exception into a 500."""

    @app.middleware("http")
    async def translate_unhandled_exceptions(request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            logger.error(
                f"Unhandled exception on {request.url.path}: {exc}",
                exc_info=True,
                extra={
                    "error_code": "INTERNAL_ERROR",
                    "path": request.url.path,
                    "method": request.method,
                },
            )
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content=build_unhandled_error_response(exc, expose_details),
            )


def build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    return {
        "error": "Invalid request data",
        "message": "One or more fields failed validation",
        "details": [
            {
                "field": ".".join(str(loc) for loc in e["loc"]),
                "message": e["msg"],
                "type": e["type"],
            }
            for e in exc.errors()
        ],
        "innerException": None,
    }


def build_unhandled_error_response(exc: Exception, expose_details: bool) -> dict:
    """Build the 500 envelope: type name always, exception text only when exposed."""
    inner = exc.__cause__ or exc.__context__
    return {
        "error": UNHANDLED_ERROR_TITLE,
        "message": str(exc) if expose_details else GENERIC_ERROR_MESSAGE,
        "details": type(exc).__name__,
        "innerException": str(inner) if (expose_details and inner) else None,
    }
