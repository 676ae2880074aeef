"""Person repository interfaces."""

from abc import ABC, abstractmethod
from typing import Optional

from mindstore.domain.person.aggregates import Admin, Person, User
from mindstore.domain.shared.value_objects import PageRequest


class PersonRepository(ABC):
    """Read access across every person variant (users and admins)."""

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[Person]:
        """Find a user or an admin by exact email."""


class UserRepository(ABC):
    """Repository interface for User aggregates."""

    @abstractmethod
    async def find_by_id(self, user_id: int) -> Optional[User]:
        """Find a user by ID."""

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by exact email."""

    @abstractmethod
    async def search_by_name(self, name: str) -> list[User]:
        """Find users whose name contains ``name`` (case-insensitive)."""

    @abstractmethod
    async def find_page(self, page_request: PageRequest) -> list[User]:
        """Return one sorted page of users."""

    @abstractmethod
    async def save(self, user: User) -> User:
        """Insert or update a user and return the persisted state."""


class AdminRepository(ABC):
    """Repository interface for Admin aggregates."""

    @abstractmethod
    async def find_by_id(self, admin_id: int) -> Optional[Admin]:
        """Find an admin by ID."""

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[Admin]:
        """Find an admin by exact email."""

    @abstractmethod
    async def save(self, admin: Admin) -> Admin:
        """Insert or update an admin and return the persisted state."""
