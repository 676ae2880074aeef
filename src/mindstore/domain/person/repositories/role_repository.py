"""Role repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from mindstore.domain.person.value_objects import Role


class RoleRepository(ABC):
    """Repository interface for the role reference table."""

    @abstractmethod
    async def find_by_id(self, role_id: int) -> Optional[Role]:
        """Find a role by ID."""

    @abstractmethod
    async def list_all(self) -> list[Role]:
        """List all roles ordered by ID."""

    @abstractmethod
    async def save(self, role: Role) -> Role:
        """Insert the role if its ID is not present yet."""
