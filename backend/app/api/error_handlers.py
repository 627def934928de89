# app/api/error_handlers.py
"""
Global exception handlers.

Every failure leaves the API in the same shape:
    {"error": str, "message": str, "timestamp": str, "details"?: object}

- ApiError → its own status, title and details
- RequestValidationError → 400 with one entry per offending field
- HTTPException from routing → 404 for unmatched routes, others keep their status
- Exception (catch-all) → 500, logged with traceback, never leaks internals
"""
import logging
from http import HTTPStatus

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.errors import ApiError, InternalFault, NotFound, ValidationFailed

logger = logging.getLogger("uvicorn.error")


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)


def _respond(exc: ApiError, headers: dict | None = None) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_response(), headers=headers)


async def api_error_handler(request: Request, exc: ApiError):
    logger.info("%s %s -> %d %s", request.method, request.url.path, exc.status_code, exc.error)
    return _respond(exc)


def _field_name(loc) -> str:
    # Drop the "body"/"query" prefix FastAPI puts in front of field paths
    parts = [str(p) for p in loc]
    if len(parts) > 1 and parts[0] in ("body", "query", "path", "header"):
        parts = parts[1:]
    return ".".join(parts)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    details = {_field_name(e["loc"]): e["msg"] for e in exc.errors()}
    logger.info("%s %s -> 400 invalid request data: %s", request.method, request.url.path, list(details))
    return _respond(ValidationFailed("Invalid request data", details=details))


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return _respond(NotFound("The requested endpoint does not exist"))

    err = ApiError(
        str(exc.detail),
        title=HTTPStatus(exc.status_code).phrase,
    )
    err.status_code = exc.status_code
    return _respond(err, headers=getattr(exc, "headers", None))


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(
        "Unhandled exception on %s %s: %r",
        request.method,
        request.url.path,
        exc,
        exc_info=exc,
    )
    return _respond(InternalFault("Something went wrong on the server"))
