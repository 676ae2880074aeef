"""Security adapters: password hashing and access tokens."""

from mindstore.infrastructure.security.exceptions import (
    InvalidTokenError,
    WeakPasswordError,
)
from mindstore.infrastructure.security.jwt_service import JWTService, TokenPayload
from mindstore.infrastructure.security.password_service import (
    PasswordHashingService,
)

__all__ = [
    "InvalidTokenError",
    "JWTService",
    "PasswordHashingService",
    "TokenPayload",
    "WeakPasswordError",
]
