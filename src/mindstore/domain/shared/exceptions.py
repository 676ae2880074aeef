"""Shared domain exceptions and error codes.

This module defines the base exception hierarchy and error codes for the
entire domain layer. All domain exceptions should inherit from DomainException
to enable centralized exception handling in the presentation layer.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Stable error codes for API clients.

    These codes are part of the public API contract. Should not be changed.
    """

    # Validation Errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_PARAMETER = "INVALID_PARAMETER"
    NOT_ALLOWED_VALUE = "NOT_ALLOWED_VALUE"
    WEAK_PASSWORD = "WEAK_PASSWORD"

    # Not Found Errors (404)
    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
    PRODUCT_NOT_FOUND = "PRODUCT_NOT_FOUND"
    CATEGORY_NOT_FOUND = "CATEGORY_NOT_FOUND"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    ADMIN_NOT_FOUND = "ADMIN_NOT_FOUND"
    ROLE_NOT_FOUND = "ROLE_NOT_FOUND"

    # Conflict Errors (409)
    CONFLICT = "CONFLICT"
    EMAIL_ALREADY_EXISTS = "EMAIL_ALREADY_EXISTS"
    PRODUCT_ALREADY_EXISTS = "PRODUCT_ALREADY_EXISTS"
    CATEGORY_ALREADY_EXISTS = "CATEGORY_ALREADY_EXISTS"

    # Authorization Errors (403)
    UNAUTHORIZED = "UNAUTHORIZED"

    # General Errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainException(Exception):  # NOQA: N818
    """Base exception for all domain-related errors.

    This exception provides structured error information that can be
    used by the presentation layer to generate consistent API responses.

    Attributes
    ----------
    message
        Human-readable error message (safe for end users)
    code
        Stable error code for programmatic handling
    details
        Optional additional context (logged but not exposed to users)
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code.value!r}, "
            f"details={self.details!r})"
        )


class ValidationError(DomainException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class InvalidParameterError(ValidationError):
    """Raised when a request parameter is malformed or out of range."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, ErrorCode.INVALID_PARAMETER, details)


class NotAllowedValueError(ValidationError):
    """Raised when a value is outside an enumerated or bounded set."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, ErrorCode.NOT_ALLOWED_VALUE, details)


class EntityNotFoundError(DomainException):
    """Raised when a requested entity cannot be found."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.ENTITY_NOT_FOUND,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class ConflictError(DomainException):
    """Raised when an operation conflicts with existing state."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.CONFLICT,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class UnauthorizedError(DomainException):
    """Raised when the caller may not act on the targeted record."""

    def __init__(
        self,
        message: str = "Not allowed to modify this record",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, ErrorCode.UNAUTHORIZED, details)
