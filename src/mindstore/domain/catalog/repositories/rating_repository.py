"""Rating repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from mindstore.domain.catalog.entities import Rating


class RatingRepository(ABC):
    """Repository interface for product ratings."""

    @abstractmethod
    async def find_by_id(self, rating_id: int) -> Optional[Rating]:
        """Find a rating by ID."""

    @abstractmethod
    async def save(self, rating: Rating) -> Rating:
        """Insert or update a rating and return it with its ID."""

    @abstractmethod
    async def delete(self, rating_id: int) -> None:
        """Delete a rating by ID."""
