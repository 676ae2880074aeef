"""Password hashing service using bcrypt."""

import bcrypt

from mindstore.infrastructure.security.exceptions import WeakPasswordError


class PasswordHashingService:
    """Hash and verify user and admin passwords.

    Implements the PasswordHasher port. Plaintext passwords never leave
    this class; only the bcrypt hash is stored.

    Examples
    --------
    >>> service = PasswordHashingService(rounds=4)
    >>> hashed = service.hash("correct horse")
    >>> service.verify("correct horse", hashed)
    True
    """

    MIN_LENGTH = 8
    MAX_LENGTH = 72  # bcrypt only looks at the first 72 bytes

    def __init__(self, rounds: int = 12):
        """Initialize the service.

        Parameters
        ----------
        rounds
            The bcrypt work factor (log2 of iterations).
        """
        self._rounds = rounds

    def hash(self, password: str) -> str:
        """Hash a plaintext password.

        Raises
        ------
        WeakPasswordError
            If password doesn't meet requirements
        """
        self.validate_strength(password)
        salt = bcrypt.gensalt(rounds=self._rounds)
        hashed = bcrypt.hashpw(password.encode("utf-8"), salt)
        return hashed.decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"),
                password_hash.encode("utf-8"),
            )
        except (ValueError, TypeError):
            # Invalid hash format
            return False

    def validate_strength(self, password: str) -> None:
        if not password:
            msg = "Password cannot be empty"
            raise WeakPasswordError(msg)

        if len(password) < self.MIN_LENGTH:
            msg = f"Password must be at least {self.MIN_LENGTH} characters"
            raise WeakPasswordError(msg)

        if len(password.encode("utf-8")) > self.MAX_LENGTH:
            msg = f"Password cannot exceed {self.MAX_LENGTH} bytes"
            raise WeakPasswordError(msg)
