"""Error hierarchy: status codes and response envelopes.

Invariants:
    - Every envelope has exactly error, message, details, innerException
    - Validation and persistence failures are 400; not-found is a bodiless 404
    - SchemaNotInitializedError is a PersistenceError with the migration message
"""

from uuid import uuid4

from timewise.core.errors import (
    ErrorCategory, HabitNotFoundError, HabitValidationError,
    PersistenceError, SchemaNotInitializedError, TimeWiseError,
)

ENVELOPE_KEYS = {"error", "message", "details", "innerException"}


def test_validation_error_envelope():
    exc = HabitValidationError("Title is required", "title")
    body = exc.to_response()
    assert exc.http_status == 400
    assert exc.category == ErrorCategory.VALIDATION
    assert set(body) == ENVELOPE_KEYS
    assert body["message"] == "Title is required"
    assert body["details"][0]["field"] == "title"


def test_not_found_has_no_body():
    exc = HabitNotFoundError(uuid4())
    assert exc.http_status == 404
    assert exc.to_response() is None


def test_persistence_error_is_400_with_generic_title():
    exc = PersistenceError("insert", "UNIQUE constraint failed: habits.id")
    body = exc.to_response()
    assert exc.http_status == 400
    assert body["error"] == "Failed to access the database"
    assert body["details"] == "DatabaseError"
    assert body["innerException"] == "UNIQUE constraint failed: habits.id"


def test_schema_not_initialized_overrides_message_and_details():
    exc = SchemaNotInitializedError("select", "no such table: habits")
    body = exc.to_response()
    assert isinstance(exc, PersistenceError)
    assert exc.http_status == 400
    assert "migrations have been applied" in body["error"]
    assert body["details"] == "Migration not applied"
    assert exc.code == "SCHEMA_NOT_INITIALIZED"


def test_all_errors_share_base():
    for exc in (
        HabitValidationError("x", "f"), HabitNotFoundError("id"),
        PersistenceError("op"), SchemaNotInitializedError("op"),
    ):
        assert isinstance(exc, TimeWiseError)
