"""Product repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from mindstore.domain.catalog.aggregates import Product
from mindstore.domain.shared.value_objects import PageRequest


class ProductRepository(ABC):
    """Repository interface for Product aggregates."""

    @abstractmethod
    async def find_by_id(self, product_id: int) -> Optional[Product]:
        """Find a product by ID."""

    @abstractmethod
    async def find_by_title(self, title: str) -> Optional[Product]:
        """Find a product by exact title."""

    @abstractmethod
    async def search_by_title(self, title: str) -> list[Product]:
        """Find products whose title contains ``title`` (case-insensitive)."""

    @abstractmethod
    async def find_page(self, page_request: PageRequest) -> list[Product]:
        """Return one sorted page of products."""

    @abstractmethod
    async def save(self, product: Product) -> Product:
        """Insert or update a product and return the persisted state.

        The product's category and rating must already be persisted.
        """

    @abstractmethod
    async def delete(self, product_id: int) -> None:
        """Delete a product by ID."""
