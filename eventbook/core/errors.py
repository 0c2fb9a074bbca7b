"""
Application errors and the FastAPI handlers that render them.

Services raise the typed errors below; the handlers registered in
``eventbook.main`` turn them into structured JSON responses of the form
``{"error": <message>, "category": <category>, "path": <path>}``.
"""

import logging
from typing import Optional

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class ErrorCategory:
    """Error categories for structured error handling"""
    VALIDATION = "validation_error"
    NOT_FOUND = "not_found_error"
    CONFLICT = "conflict_error"
    UPSTREAM = "upstream_error"
    DATABASE = "database_error"
    INTERNAL = "internal_error"


class AppError(Exception):
    """Base application error with structured information"""

    def __init__(
        self,
        message: str,
        category: str = ErrorCategory.INTERNAL,
        status_code: int = 500,
        details: Optional[dict] = None,
    ):
        self.message = message
        self.category = category
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(AppError):
    """Unknown event or confirmation token"""
    def __init__(self, message: str):
        super().__init__(
            message=message,
            category=ErrorCategory.NOT_FOUND,
            status_code=404,
        )


class BadRequestError(AppError):
    """Missing fields, empty recipient set or an invalid action"""
    def __init__(self, message: str, field: Optional[str] = None):
        details = {"field": field} if field else {}
        super().__init__(
            message=message,
            category=ErrorCategory.VALIDATION,
            status_code=400,
            details=details,
        )


class ConflictError(AppError):
    """Request conflicts with the current state of a record"""
    def __init__(self, message: str):
        super().__init__(
            message=message,
            category=ErrorCategory.CONFLICT,
            status_code=409,
        )


class UpstreamFailure(AppError):
    """
    A single email send rejected by the email service.

    Only ever recorded in dispatch statistics; it is not raised out of a request.
    """
    def __init__(self, message: str, recipient: str):
        super().__init__(
            message=message,
            category=ErrorCategory.UPSTREAM,
            status_code=502,
            details={"recipient": recipient},
        )


def _error_body(message: str, category: str, request: Request, **extra) -> dict:
    return {
        "error": message,
        "category": category,
        "path": request.url.path,
        **extra,
    }


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """FastAPI exception handler for AppError"""
    log = logger.error if exc.status_code >= 500 else logger.info
    log(
        f"{exc.category} on {request.method} {request.url.path}: {exc.message}",
        extra={"category": exc.category, "status_code": exc.status_code, **exc.details},
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(exc.message, exc.category, request, **exc.details),
    )


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Request body or query validation errors are reported as 400."""
    errors = [
        {
            "field": ".".join(str(loc) for loc in err["loc"] if loc != "body"),
            "message": err["msg"],
        }
        for err in exc.errors()
    ]
    logger.info(f"Validation error on {request.url.path}: {errors}")

    fields = ", ".join(e["field"] for e in errors if e["field"])
    message = f"Invalid or missing fields: {fields}" if fields else "Request validation failed"
    return JSONResponse(
        status_code=400,
        content=_error_body(
            message, ErrorCategory.VALIDATION, request, validation_errors=errors
        ),
    )


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error(
        f"Database error: {type(exc).__name__} on {request.url.path}",
        exc_info=exc,
    )
    return JSONResponse(
        status_code=500,
        content=_error_body(
            "Database operation failed. Please try again.",
            ErrorCategory.DATABASE,
            request,
        ),
    )


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.critical(
        f"Unexpected error: {type(exc).__name__} on {request.url.path}",
        exc_info=exc,
    )
    # Don't expose internal details
    return JSONResponse(
        status_code=500,
        content=_error_body(
            "An unexpected error occurred.", ErrorCategory.INTERNAL, request
        ),
    )
