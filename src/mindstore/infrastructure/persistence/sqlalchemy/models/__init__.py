"""SQLAlchemy models; importing this package registers every table."""

from mindstore.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from mindstore.infrastructure.persistence.sqlalchemy.models.category_model import (
    CategoryModel,
)
from mindstore.infrastructure.persistence.sqlalchemy.models.person_model import (
    PersonModel,
)
from mindstore.infrastructure.persistence.sqlalchemy.models.product_model import (
    ProductModel,
)
from mindstore.infrastructure.persistence.sqlalchemy.models.rating_model import (
    RatingModel,
)
from mindstore.infrastructure.persistence.sqlalchemy.models.role_model import (
    RoleModel,
)

__all__ = [
    "Base",
    "CategoryModel",
    "PersonModel",
    "ProductModel",
    "RatingModel",
    "RoleModel",
    "TimestampMixin",
]
