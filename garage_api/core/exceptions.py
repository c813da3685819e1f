"""
Global exception handling for the application.
Every error leaves the API as ``{"success": false, "error": ..., "details"?: ...}``.
"""

from typing import Optional

import structlog
from fastapi import Request, status
from fastapi.responses import JSONResponse

from garage_api.config import get_settings

logger = structlog.get_logger(__name__)


class AppError(Exception):
    """Base class for all application exceptions."""
    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[str] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class ValidationError(AppError):
    """Malformed or missing request input."""
    def __init__(self, message: str = "Invalid request", details: Optional[str] = None):
        super().__init__(message, status.HTTP_400_BAD_REQUEST, details)


class ForbiddenError(AppError):
    """Caller may not act on the requested tenant."""
    def __init__(self, message: str = "Forbidden", details: Optional[str] = None):
        super().__init__(message, status.HTTP_403_FORBIDDEN, details)


class NotFoundError(AppError):
    """Resource not found error."""
    def __init__(self, message: str = "Entity not found", details: Optional[str] = None):
        super().__init__(message, status.HTTP_404_NOT_FOUND, details)


class ConflictError(AppError):
    """A record with the same identity already exists."""
    def __init__(self, message: str = "Conflict", details: Optional[str] = None):
        super().__init__(message, status.HTTP_409_CONFLICT, details)


class InternalError(AppError):
    """Store failure or other server-side problem."""
    def __init__(self, message: str = "Internal server error", details: Optional[str] = None):
        super().__init__(message, status.HTTP_500_INTERNAL_SERVER_ERROR, details)


def error_body(message: str, details: Optional[str] = None) -> dict:
    body = {"success": False, "error": message}
    if details is not None and get_settings().EXPOSE_ERROR_DETAILS:
        body["details"] = details
    return body


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Convert an AppError into the JSON error shape."""
    log = logger.warning if exc.status_code >= 500 else logger.info
    log(
        "Request rejected",
        error=exc.__class__.__name__,
        message=exc.message,
        details=exc.details,
        path=request.url.path,
        status_code=exc.status_code,
    )
    return JSONResponse(status_code=exc.status_code, content=error_body(exc.message, exc.details))


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all uncaught exceptions globally."""
    if isinstance(exc, AppError):
        return await app_error_handler(request, exc)

    logger.exception("Unexpected error occurred", path=request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("An unexpected error occurred", str(exc) or exc.__class__.__name__),
    )
