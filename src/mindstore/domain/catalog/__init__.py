"""Catalog domain: products, their categories and their ratings."""

from mindstore.domain.catalog.aggregates import Product
from mindstore.domain.catalog.entities import Category, Rating
from mindstore.domain.catalog.exceptions import (
    CategoryAlreadyExistsError,
    CategoryNotFoundError,
    ProductAlreadyExistsError,
    ProductNotFoundError,
)
from mindstore.domain.catalog.repositories import (
    CategoryRepository,
    ProductRepository,
    RatingRepository,
)

# Fields clients may sort product listings by (matched case-insensitively).
PRODUCT_SORT_FIELDS = frozenset({"id", "title", "price"})

__all__ = [
    "PRODUCT_SORT_FIELDS",
    "Category",
    "CategoryAlreadyExistsError",
    "CategoryNotFoundError",
    "CategoryRepository",
    "Product",
    "ProductAlreadyExistsError",
    "ProductNotFoundError",
    "ProductRepository",
    "Rating",
    "RatingRepository",
]
