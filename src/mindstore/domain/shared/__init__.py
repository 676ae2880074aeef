"""Shared domain components.

This module exports shared value objects and exceptions used across
domain boundaries.
"""

from mindstore.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    InvalidParameterError,
    NotAllowedValueError,
    UnauthorizedError,
    ValidationError,
)
from mindstore.domain.shared.value_objects import PageRequest, SortDirection

__all__ = [
    # Error codes
    "ErrorCode",
    # Base exception
    "DomainException",
    # Exception categories
    "ValidationError",
    "InvalidParameterError",
    "NotAllowedValueError",
    "EntityNotFoundError",
    "ConflictError",
    "UnauthorizedError",
    # Value objects
    "PageRequest",
    "SortDirection",
]
