"""Domain errors and the exception handlers that render them.

Services raise the errors below; the handlers turn every error surface
(domain errors, HTTPException, request validation, unhandled exceptions)
into the same ``{"success": false, "message", "request_id"}`` envelope.
"""

from typing import Any

from asgi_correlation_id import correlation_id
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.checkinn.core.logging import get_logger

logger = get_logger(__name__)


class CheckInnError(Exception):
    """Base error carrying the HTTP status it maps to."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFoundError(CheckInnError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Resource not found"


class ConflictError(CheckInnError):
    """A state transition was requested from a state that does not allow it."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Operation not allowed in the current state"

    def __init__(self, message: str | None = None, current_status: str | None = None):
        super().__init__(message)
        self.current_status = current_status


class ForbiddenError(CheckInnError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "You do not have permission to perform this action"


class ValidationError(CheckInnError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Validation failed"


class AuthenticationError(CheckInnError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Not authenticated"


def error_body(message: Any, **extra: Any) -> dict[str, Any]:
    """Build the error envelope, tagged with the current correlation ID."""
    return {
        "success": False,
        "message": message,
        **extra,
        "request_id": correlation_id.get(),
    }


def setup_exception_handlers(app: FastAPI) -> None:
    """Configure exception handlers that include request_id in responses."""

    @app.exception_handler(CheckInnError)
    async def checkinn_error_handler(request: Request, exc: CheckInnError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("Domain error", error=exc.message, path=request.url.path)
        return JSONResponse(status_code=exc.status_code, content=error_body(exc.message))

    @app.exception_handler(StarletteHTTPException)
    async def starlette_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(exc.detail),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(exc.detail),
            headers=exc.headers,
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=error_body("Validation failed", errors=jsonable_encoder(exc.errors())),
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(
            "Unhandled exception",
            exc_info=exc,
            request_id=correlation_id.get(),
            path=request.url.path,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body("Internal server error"),
        )
