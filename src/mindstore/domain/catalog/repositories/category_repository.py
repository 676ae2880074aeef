"""Category repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from mindstore.domain.catalog.entities import Category


class CategoryRepository(ABC):
    """Repository interface for categories."""

    @abstractmethod
    async def find_by_id(self, category_id: int) -> Optional[Category]:
        """Find a category by ID."""

    @abstractmethod
    async def find_by_name(self, name: str) -> Optional[Category]:
        """Find a category by exact name."""

    @abstractmethod
    async def list_all(self) -> list[Category]:
        """List all categories ordered by name."""

    @abstractmethod
    async def save(self, category: Category) -> Category:
        """Insert a category and return it with its ID."""
