"""Person domain exceptions."""

from typing import Optional

from mindstore.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
)


class UserNotFoundError(EntityNotFoundError):
    """User not found."""

    def __init__(self, user_id: Optional[int] = None) -> None:
        super().__init__(
            "User not found",
            ErrorCode.USER_NOT_FOUND,
            {"user_id": user_id} if user_id is not None else None,
        )


class AdminNotFoundError(EntityNotFoundError):
    """Admin not found."""

    def __init__(self, admin_id: Optional[int] = None) -> None:
        super().__init__(
            "Admin not found",
            ErrorCode.ADMIN_NOT_FOUND,
            {"admin_id": admin_id} if admin_id is not None else None,
        )


class RoleNotFoundError(EntityNotFoundError):
    """Role not found."""

    def __init__(self, role_id: Optional[int] = None) -> None:
        super().__init__(
            "Role not found",
            ErrorCode.ROLE_NOT_FOUND,
            {"role_id": role_id} if role_id is not None else None,
        )


class EmailAlreadyExistsError(ConflictError):
    """Email already used by a user or an admin."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(
            "Email is already being used",
            ErrorCode.EMAIL_ALREADY_EXISTS,
            {"email": email},
        )
