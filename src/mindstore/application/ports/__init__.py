"""Ports the application layer needs from infrastructure."""

from mindstore.application.ports.password_hasher import PasswordHasher

__all__ = ["PasswordHasher"]
