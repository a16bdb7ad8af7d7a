"""Standardized error handling for API actions.

Database and domain failures are mapped to a stable ``code`` and a message
that is safe to show users. Outside production the raw message is passed
through for unmapped errors.
"""

import logging
from dataclasses import asdict, dataclass

import falcon
import falcon.asgi

from rolegate.domain.exceptions import (
    NotFound,
    PermissionDenied,
    Unauthenticated,
    ValidationError,
)

logger = logging.getLogger(__name__)

PG_UNIQUE_VIOLATION = "23505"
PG_FOREIGN_KEY_VIOLATION = "23503"

GENERIC_MESSAGE = "The system encountered an unexpected issue. Our team has been notified."


@dataclass
class AppError:
    """Failure payload returned to clients."""

    error: str
    code: str
    status: int = 500
    success: bool = False

    def to_media(self) -> dict:
        return asdict(self)


def _sqlstate(error: BaseException) -> str | None:
    # psycopg errors carry sqlstate; other drivers use pgcode or code
    for attr in ("sqlstate", "pgcode", "code"):
        value = getattr(error, attr, None)
        if isinstance(value, str):
            return value
    return None


def handle_action_error(error: BaseException, *, production: bool) -> AppError:
    """Log error and translate it into an AppError."""
    sqlstate = _sqlstate(error)
    logger.error(
        "Action failed: %s (code=%s)",
        error,
        sqlstate,
        exc_info=None if production else error,
    )

    message = str(error)
    status = getattr(error, "status", None)
    status = status if isinstance(status, int) else None

    if sqlstate == PG_UNIQUE_VIOLATION:
        return AppError(
            "Unique constraint violation: This record already exists.",
            "CONFLICT",
            status or 409,
        )
    if sqlstate == PG_FOREIGN_KEY_VIOLATION:
        return AppError(
            "Resource dependency error: This item is linked to other records.",
            "FOREIGN_KEY_VIOLATION",
            status or 409,
        )
    if isinstance(error, NotFound):
        return AppError("The requested resource was not found.", "NOT_FOUND", 404)
    if isinstance(error, Unauthenticated) or "Unauthorized" in message or status == 401:
        return AppError(
            "Security violation: Unauthorized access attempt.", "UNAUTHORIZED", 401
        )
    if isinstance(error, PermissionDenied):
        return AppError("Permission denied", "FORBIDDEN", 403)
    if isinstance(error, ValidationError):
        return AppError(message, "VALIDATION_ERROR", 400)

    if production or not message:
        message = GENERIC_MESSAGE
    return AppError(message, "INTERNAL_SERVER_ERROR", status or 500)


def create_error_handler(production: bool):
    """Falcon catch-all handler bound to the environment."""

    async def handle(
        req: falcon.asgi.Request, resp: falcon.asgi.Response, ex: Exception, params
    ) -> None:
        app_error = handle_action_error(ex, production=production)
        resp.status = falcon.code_to_http_status(app_error.status)
        resp.media = app_error.to_media()

    return handle


def success_response(data=None) -> dict:
    """Standard success payload."""
    return {"success": True, "data": data}
