"""Unit tests for action error mapping."""

import pytest

from rolegate.domain.exceptions import (
    NotFound,
    PermissionDenied,
    Unauthenticated,
    ValidationError,
)
from rolegate.interfaces.api.errors import (
    GENERIC_MESSAGE,
    handle_action_error,
    success_response,
)


class _DbError(Exception):
    """Stand-in for a driver error carrying a SQLSTATE."""

    def __init__(self, message: str, sqlstate: str) -> None:
        super().__init__(message)
        self.sqlstate = sqlstate


@pytest.mark.parametrize("production", [True, False])
def test_unique_violation(production: bool) -> None:
    err = handle_action_error(_DbError("dup key", "23505"), production=production)
    assert err.code == "CONFLICT"
    assert err.status == 409
    assert err.success is False
    assert "already exists" in err.error


def test_foreign_key_violation() -> None:
    err = handle_action_error(_DbError("fk", "23503"), production=True)
    assert err.code == "FOREIGN_KEY_VIOLATION"


def test_not_found() -> None:
    err = handle_action_error(NotFound("User", "1"), production=True)
    assert (err.code, err.status) == ("NOT_FOUND", 404)


@pytest.mark.parametrize(
    "error", [Unauthenticated("no session"), RuntimeError("Unauthorized call")]
)
def test_unauthorized(error: Exception) -> None:
    err = handle_action_error(error, production=True)
    assert (err.code, err.status) == ("UNAUTHORIZED", 401)


def test_permission_denied() -> None:
    err = handle_action_error(PermissionDenied("nope"), production=True)
    assert (err.code, err.status) == ("FORBIDDEN", 403)


def test_validation_error_keeps_message() -> None:
    err = handle_action_error(ValidationError("Nothing to update"), production=True)
    assert err.status == 400
    assert err.error == "Nothing to update"


def test_unexpected_error_masked_in_production() -> None:
    err = handle_action_error(RuntimeError("connection string leaked"), production=True)
    assert err.code == "INTERNAL_SERVER_ERROR"
    assert err.status == 500
    assert err.error == GENERIC_MESSAGE


def test_unexpected_error_exposed_in_development() -> None:
    err = handle_action_error(RuntimeError("boom"), production=False)
    assert err.error == "boom"


def test_error_status_attribute_respected() -> None:
    error = RuntimeError("teapot")
    error.status = 418
    assert handle_action_error(error, production=True).status == 418


def test_to_media() -> None:
    media = handle_action_error(NotFound("Task", "t1"), production=True).to_media()
    assert media == {
        "error": "The requested resource was not found.",
        "code": "NOT_FOUND",
        "status": 404,
        "success": False,
    }


def test_success_response() -> None:
    assert success_response() == {"success": True, "data": None}
    assert success_response({"id": 1}) == {"success": True, "data": {"id": 1}}
