"""Error Handlers — global exception handlers for the feed API.

Invariants:
    - FeedError → {"error": message, "code": code} with the error's HTTP status
    - RequestValidationError → 400 with field-level details
    - Starlette HTTPException (unknown route, wrong method) → {"error": ...}
    - Exception (catch-all) → 500, never leaks internal details outside development mode

Design Decisions:
    - Four-layer handler: domain (FeedError), validation (Pydantic), routing, catch-all
    - Extracted from main.py (ADR: import fan-out < 10)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import get_settings
from app.core.errors import FeedError, InternalError

logger = logging.getLogger(__name__)

_VALUE_ERROR_PREFIX = "Value error, "


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_feed_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_feed_error_handler(app: FastAPI) -> None:
    """Register feed domain/infrastructure error handler."""

    @app.exception_handler(FeedError)
    async def feed_error_handler(request: Request, exc: FeedError):
        """Handle all feed domain/infrastructure errors."""
        log = logger.error if exc.http_status >= 500 else logger.info
        log(
            f"FeedError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                **exc.context.log_fields(),
            },
        )
        content = exc.to_response()
        if isinstance(exc, InternalError) and get_settings().is_development:
            content["debug"] = exc.detail
        return JSONResponse(status_code=exc.http_status, content=content)


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Register routing-level HTTP error handler."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            content = {"error": "Endpoint not found", "path": request.url.path}
        else:
            content = {"error": str(exc.detail)}
        return JSONResponse(
            status_code=exc.status_code, content=content, headers=exc.headers,
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        content = {"error": "Internal server error", "code": "INTERNAL_ERROR"}
        if get_settings().is_development:
            content["debug"] = repr(exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=content,
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    details = [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": _clean_message(e["msg"]),
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    return {
        "error": details[0]["message"] if details else "Invalid request data",
        "code": "VALIDATION_ERROR",
        "details": details,
    }


def _clean_message(msg: str) -> str:
    if msg.startswith(_VALUE_ERROR_PREFIX):
        return msg[len(_VALUE_ERROR_PREFIX):]
    return msg
