from typing import Protocol


class PasswordHasher(Protocol):
    """Turns a plaintext password into a storable hash."""

    def hash(self, password: str) -> str: ...

    def verify(self, password: str, password_hash: str) -> bool: ...
