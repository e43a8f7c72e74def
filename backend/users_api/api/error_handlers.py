"""Error Handlers — global exception handlers for the Users API.

Invariants:
    - UsersApiError → to_response() with the error's http_status; code, category
      and severity logged (WARNING severity at warning level, others at error)
    - HTTPException (404, 405) → {"error": detail} with the original status and headers
    - Exception (catch-all) → 500 "Internal Server Error", never leaks internal details

Design Decisions:
    - Three-layer handler registered from one place, called by create_app
    - All bodies built by responses.respond_with_json so the envelope has one shape
"""

import logging

from fastapi import FastAPI, Request
from starlette.exceptions import HTTPException as StarletteHTTPException

from users_api.api.responses import respond_with_error, respond_with_json
from users_api.core.errors import (
    ErrorSeverity, InternalServerError, UsersApiError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_users_api_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_users_api_error_handler(app: FastAPI) -> None:

    @app.exception_handler(UsersApiError)
    async def users_api_error_handler(request: Request, exc: UsersApiError):
        """Handle all domain/infrastructure errors."""
        level = logging.WARNING if exc.severity == ErrorSeverity.WARNING else logging.ERROR
        logger.log(
            level,
            f"UsersApiError: {exc.message}",
            extra={
                "error_code": exc.code,
                "category": exc.category.value,
                "severity": exc.severity.value,
                "path": request.url.path,
                "method": request.method,
            },
        )
        return respond_with_json(exc.http_status, exc.to_response())


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        response = respond_with_error(exc.status_code, str(exc.detail))
        if exc.headers:
            response.headers.update(exc.headers)
        return response


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        error = InternalServerError()
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={
                "error_code": error.code,
                "path": request.url.path,
                "method": request.method,
            },
        )
        return respond_with_json(error.http_status, error.to_response())
