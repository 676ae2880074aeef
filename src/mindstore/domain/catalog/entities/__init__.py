from mindstore.domain.catalog.entities.category import Category
from mindstore.domain.catalog.entities.rating import Rating

__all__ = ["Category", "Rating"]
