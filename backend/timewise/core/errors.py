"""Error Hierarchy: typed, categorized exceptions for all TimeWise failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity and http_status
    - to_response() produces the shared envelope {error, message, details, innerException}
    - HabitNotFoundError has no body (to_response() returns None)
    - Persistence failures are 400-level: the request is rejected, the process is fine

Design Decisions:
    - Single hierarchy with TimeWiseError base: one FastAPI handler catches all
    - SchemaNotInitializedError subclasses PersistenceError: callers catching the
      generic storage failure also see the missing-schema case
"""

from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


class TimeWiseError(Exception):
    """Base exception for all TimeWise errors."""

    title = "An error occurred while processing the request"

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
        details: Any = None,
        inner_message: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status
        self.details = details
        self.inner_message = inner_message

    def to_response(self) -> dict | None:
        """Convert to the standardized REST error envelope."""
        return {
            "error": self.title,
            "message": self.message,
            "details": self.details,
            "innerException": self.inner_message,
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class HabitValidationError(TimeWiseError):
    """Client input failed a domain check (blank title, unknown type)."""

    title = "Invalid request data"

    def __init__(self, message: str, field: str):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
            details=[{"field": field, "message": message, "type": "value_error"}],
        )
        self.field = field


class HabitNotFoundError(TimeWiseError):
    """Requested habit does not exist. Rendered as a bare 404."""

    def __init__(self, habit_id: Any):
        super().__init__(
            f"Habit '{habit_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, 404,
        )
        self.habit_id = habit_id

    def to_response(self) -> dict | None:
        return None


# ─── Storage Errors ─────────────────────────────────────────────

class PersistenceError(TimeWiseError):
    """Database operation failed (connectivity, constraint, driver)."""

    title = "Failed to access the database"

    def __init__(self, operation: str, inner_message: str | None = None):
        super().__init__(
            f"Database {operation} failed",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.ERROR, 400,
            details="DatabaseError",
            inner_message=inner_message,
        )
        self.operation = operation


class SchemaNotInitializedError(PersistenceError):
    """The habits table is missing: migrations were never applied."""

    title = (
        "Table not found in the database. "
        "Check that the migrations have been applied."
    )

    def __init__(self, operation: str, inner_message: str | None = None):
        super().__init__(operation, inner_message)
        self.code = "SCHEMA_NOT_INITIALIZED"
        self.severity = ErrorSeverity.CRITICAL
        self.details = "Migration not applied"
