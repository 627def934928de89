# app/core/errors.py
"""
Error taxonomy for the API.

Every failure a handler can report is one of the ApiError subclasses below.
They are raised where the problem is detected and turned into the wire shape
exactly once, by the handlers in app.api.error_handlers:

    {"error": str, "message": str, "timestamp": ISO-8601, "details"?: object}
"""
import datetime as dt
from typing import Any


def utc_now() -> dt.datetime:
    """Current UTC time, timezone aware."""
    return dt.datetime.now(dt.timezone.utc)


def iso_timestamp(value: dt.datetime | None = None) -> str:
    """Format a UTC datetime as ISO-8601 with a trailing Z."""
    value = value or utc_now()
    return value.isoformat().replace("+00:00", "Z")


class ApiError(Exception):
    """
    Base class for all structured API failures.

    Subclasses fix the HTTP status and the default error title; callers may
    override the title when a more specific one reads better on the wire
    (e.g. "User already exists" instead of "Conflict").
    """
    status_code: int = 500
    title: str = "Internal server error"

    def __init__(
        self,
        message: str,
        *,
        title: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.error = title or self.title
        self.details = details

    def to_response(self) -> dict[str, Any]:
        body: dict[str, Any] = {
            "error": self.error,
            "message": self.message,
            "timestamp": iso_timestamp(),
        }
        if self.details is not None:
            body["details"] = self.details
        return body


class ValidationFailed(ApiError):
    status_code = 400
    title = "Validation failed"


class Unauthorized(ApiError):
    status_code = 401
    title = "Unauthorized"


class Forbidden(ApiError):
    status_code = 403
    title = "Forbidden"


class NotFound(ApiError):
    status_code = 404
    title = "Not found"


class Conflict(ApiError):
    status_code = 409
    title = "Conflict"


class InternalFault(ApiError):
    status_code = 500
    title = "Internal server error"
