"""Error Handlers — global exception handlers for the registration API.

Invariants:
    - RegistrationError → its own http_status with {"error": message}, logged at its severity
    - HTTPException (404, 405) → same status with {"error": detail}
    - RequestValidationError → 400 {"error": "Invalid request"}
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Four layers: domain (RegistrationError), routing (HTTPException), validation (Pydantic), catch-all (Exception)
    - Extracted from main.py so create_app() stays a short list of registrations
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from registration_api.core.errors import (
    INTERNAL_ERROR_MESSAGE,
    INVALID_REQUEST_MESSAGE,
    ErrorSeverity,
    RegistrationError,
)

logger = logging.getLogger(__name__)

SEVERITY_LOG_LEVELS = {
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.CRITICAL,
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_registration_error_handler(app)
    _register_http_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_registration_error_handler(app: FastAPI) -> None:
    """Register the domain error handler."""

    @app.exception_handler(RegistrationError)
    async def registration_error_handler(request: Request, exc: RegistrationError):
        """Handle rejected registrations."""
        reason = getattr(exc, "reason", "")
        logger.log(
            SEVERITY_LOG_LEVELS[exc.severity],
            f"Rejected request on {request.url.path}: {exc.code}"
            + (f" ({reason})" if reason else ""),
            extra={
                "error_code": exc.code,
                "category": exc.category.value,
                "path": request.url.path,
                "reason": reason or None,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Register routing error handler (404, 405) with the flat error body."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        """Keep the {"error": message} shape; headers such as Allow pass through."""
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=exc.headers,
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle path/query validation errors with the flat error body."""
        logger.warning(
            f"Validation error on {request.url.path}: {_describe(exc)}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": INVALID_REQUEST_MESSAGE},
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
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": INTERNAL_ERROR_MESSAGE},
        )


def _describe(exc: RequestValidationError) -> str:
    return ", ".join(
        f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}"
        for e in exc.errors()
    )
