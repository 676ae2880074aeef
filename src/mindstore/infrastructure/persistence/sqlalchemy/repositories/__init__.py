from mindstore.infrastructure.persistence.sqlalchemy.repositories.category_repository import (  # NOQA: E501
    CategoryRepositorySQLAlchemy,
)
from mindstore.infrastructure.persistence.sqlalchemy.repositories.factory import (
    SQLAlchemyRepositoryFactory,
)
from mindstore.infrastructure.persistence.sqlalchemy.repositories.person_repository import (  # NOQA: E501
    AdminRepositorySQLAlchemy,
    PersonRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)
from mindstore.infrastructure.persistence.sqlalchemy.repositories.product_repository import (  # NOQA: E501
    ProductRepositorySQLAlchemy,
)
from mindstore.infrastructure.persistence.sqlalchemy.repositories.rating_repository import (  # NOQA: E501
    RatingRepositorySQLAlchemy,
)
from mindstore.infrastructure.persistence.sqlalchemy.repositories.role_repository import (  # NOQA: E501
    RoleRepositorySQLAlchemy,
)

__all__ = [
    "AdminRepositorySQLAlchemy",
    "CategoryRepositorySQLAlchemy",
    "PersonRepositorySQLAlchemy",
    "ProductRepositorySQLAlchemy",
    "RatingRepositorySQLAlchemy",
    "RoleRepositorySQLAlchemy",
    "SQLAlchemyRepositoryFactory",
    "UserRepositorySQLAlchemy",
]
