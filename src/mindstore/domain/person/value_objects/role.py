"""Roles are fixed reference data keyed by an enumeration."""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class RoleName(str, Enum):
    """Role keys (who is an admin and who is not)."""

    USER = "USER"
    ADMIN = "ADMIN"


# Role ids as seeded into the roles table.
DEFAULT_ROLE_TABLE: Mapping[RoleName, int] = MappingProxyType(
    {
        RoleName.USER: 1,
        RoleName.ADMIN: 2,
    }
)


@dataclass(frozen=True)
class Role:
    """A persisted role row."""

    id: int
    name: RoleName

    @property
    def is_admin(self) -> bool:
        return self.name == RoleName.ADMIN
