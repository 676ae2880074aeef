"""Security adapter exceptions."""

from mindstore.domain.shared.exceptions import ErrorCode, ValidationError


class WeakPasswordError(ValidationError):
    """Raised when a password doesn't meet strength requirements."""

    def __init__(self, message: str = "Password does not meet requirements"):
        super().__init__(message, ErrorCode.WEAK_PASSWORD)


class InvalidTokenError(Exception):
    """Raised when a JWT token is invalid, expired, or malformed."""

    def __init__(self, message: str = "Invalid or expired token"):
        self.message = message
        super().__init__(self.message)
