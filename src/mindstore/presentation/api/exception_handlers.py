"""Centralized exception handlers for the FastAPI application.

Domain exceptions are mapped to HTTP responses with a consistent body:

    {
        "detail": "Human-readable error message",
        "code": "MACHINE_READABLE_ERROR_CODE"
    }
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from mindstore.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    UnauthorizedError,
    ValidationError,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Error Code to HTTP Status Mapping
# =============================================================================

ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    # 400 Bad Request - validation errors
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_PARAMETER: status.HTTP_400_BAD_REQUEST,
    ErrorCode.NOT_ALLOWED_VALUE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.WEAK_PASSWORD: status.HTTP_400_BAD_REQUEST,
    # 404 Not Found
    ErrorCode.ENTITY_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.PRODUCT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.CATEGORY_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.ADMIN_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.ROLE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    # 409 Conflict - already exists
    ErrorCode.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorCode.EMAIL_ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    ErrorCode.PRODUCT_ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    ErrorCode.CATEGORY_ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    # 403 Forbidden - caller may not touch this record
    ErrorCode.UNAUTHORIZED: status.HTTP_403_FORBIDDEN,
    # 500 Internal Server Error
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _get_status_for_exception(exc: DomainException) -> int:
    """Determine HTTP status code for a domain exception.

    Uses the error code mapping, with fallback based on exception type.
    """
    if exc.code in ERROR_CODE_TO_STATUS:
        return ERROR_CODE_TO_STATUS[exc.code]

    if isinstance(exc, EntityNotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, ConflictError):
        return status.HTTP_409_CONFLICT
    if isinstance(exc, ValidationError):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(exc, UnauthorizedError):
        return status.HTTP_403_FORBIDDEN

    return status.HTTP_400_BAD_REQUEST


def _create_error_response(
    status_code: int,
    message: str,
    code: str,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "detail": message,
            "code": code,
        },
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI application."""

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle all domain exceptions with structured response.

        Details are logged but never sent to the client.
        """
        status_code = _get_status_for_exception(exc)

        logger.warning(
            "Domain exception on %s %s: %s (code=%s, details=%s)",
            request.method,
            request.url.path,
            exc.message,
            exc.code.value,
            exc.details,
        )

        return _create_error_response(
            status_code=status_code,
            message=exc.message,
            code=exc.code.value,
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Catch-all for anything the domain handler does not cover."""
        logger.exception(
            "Unhandled exception on %s %s: %s",
            request.method,
            request.url.path,
            exc,
        )
        return _create_error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message="An internal error occurred",
            code=ErrorCode.INTERNAL_ERROR.value,
        )
