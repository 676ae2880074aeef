"""Caller context for request-scoped identity."""

from __future__ import annotations

from dataclasses import dataclass

from mindstore.domain.person import RoleName


@dataclass(frozen=True)
class CallerContext:
    """Immutable identity of whoever issued the current request."""

    person_id: int
    email: str
    role: RoleName = RoleName.USER

    @property
    def is_admin(self) -> bool:
        return self.role == RoleName.ADMIN

    def is_self(self, person_id: int) -> bool:
        return self.person_id == person_id

    def __str__(self) -> str:
        return f"CallerContext({self.email})"
