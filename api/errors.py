"""
Module 09D - API Error Handling

Standardized error handling for the API. Every error body has the shape
{"success": false, "error": "<message>", "code": "<CODE>", "details": {...}}.

Transport failures are not API errors: POST /api/request reports them with
HTTP 200 and success=false.
"""

import logging
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from api.models.responses import ErrorResponse
from core.schemas.errors import ErrorCodes, InputValidationError, StoreError


logger = logging.getLogger(__name__)


class APIError(Exception):
    """Base API error with structured response."""

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = 400,
        details: dict[str, Any] | None = None,
    ):
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        return ErrorResponse(
            success=False,
            error=self.message,
            code=self.code,
            details=self.details,
        )


class InvalidRequestError(APIError):
    """Invalid request parameters."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        code: str = ErrorCodes.INVALID_REQUEST,
    ):
        super().__init__(
            code=code,
            message=message,
            status_code=400,
            details=details,
        )


class NotFoundError(APIError):
    """Requested history record does not exist."""

    def __init__(self, message: str = "Request not found", details: dict[str, Any] | None = None):
        super().__init__(
            code=ErrorCodes.RECORD_NOT_FOUND,
            message=message,
            status_code=404,
            details=details,
        )


class StoreUnavailableError(APIError):
    """Record store could not complete the operation."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            code=ErrorCodes.STORE_ERROR,
            message=message,
            status_code=500,
            details=details,
        )


class InternalError(APIError):
    """Internal server error."""

    def __init__(self, message: str = "Internal server error", details: dict[str, Any] | None = None):
        super().__init__(
            code=ErrorCodes.INTERNAL_ERROR,
            message=message,
            status_code=500,
            details=details,
        )


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    """Handle APIError exceptions."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_response().model_dump(),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed input fails fast with 400, before any outbound call."""
    invalid = InputValidationError.from_errors(exc.errors())
    error = InvalidRequestError(invalid.message, details=invalid.details, code=invalid.code)
    return await api_error_handler(request, error)


async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    """Store failures on history endpoints surface as 500 with the underlying message."""
    return await api_error_handler(request, StoreUnavailableError(exc.message, details=exc.details))


async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.error(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    error = InternalError("An unexpected error occurred", details={"type": type(exc).__name__})
    return await api_error_handler(request, error)
