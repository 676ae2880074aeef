from mindstore.domain.catalog.repositories.category_repository import (
    CategoryRepository,
)
from mindstore.domain.catalog.repositories.product_repository import (
    ProductRepository,
)
from mindstore.domain.catalog.repositories.rating_repository import (
    RatingRepository,
)

__all__ = ["CategoryRepository", "ProductRepository", "RatingRepository"]
