"""SQLAlchemy persistence for MindStore.

Provides:
- Base and the declarative models (persons, roles, categories, ratings,
  products)
- Repository implementations for every domain repository interface
- SQLAlchemyRepositoryFactory bundling them around one AsyncSession
"""

from mindstore.infrastructure.persistence.sqlalchemy.models import Base
from mindstore.infrastructure.persistence.sqlalchemy.repositories import (
    AdminRepositorySQLAlchemy,
    CategoryRepositorySQLAlchemy,
    PersonRepositorySQLAlchemy,
    ProductRepositorySQLAlchemy,
    RatingRepositorySQLAlchemy,
    RoleRepositorySQLAlchemy,
    SQLAlchemyRepositoryFactory,
    UserRepositorySQLAlchemy,
)

__all__ = [
    "AdminRepositorySQLAlchemy",
    "Base",
    "CategoryRepositorySQLAlchemy",
    "PersonRepositorySQLAlchemy",
    "ProductRepositorySQLAlchemy",
    "RatingRepositorySQLAlchemy",
    "RoleRepositorySQLAlchemy",
    "SQLAlchemyRepositoryFactory",
    "UserRepositorySQLAlchemy",
]
