"""Repository factory protocol for application layer."""

from __future__ import annotations

from typing import Any, Protocol

from mindstore.domain.catalog import (
    CategoryRepository,
    ProductRepository,
    RatingRepository,
)
from mindstore.domain.person import (
    AdminRepository,
    PersonRepository,
    RoleRepository,
    UserRepository,
)


class RepositoryFactory(Protocol):
    """Protocol for creating repositories bound to one unit of work."""

    @property
    def session(self) -> Any:
        """Get the database session for transaction management.

        The type is intentionally `Any` to avoid coupling the
        application layer to specific database implementations.
        Use this for commit/rollback at the presentation layer.
        """
        ...

    def person_repository(self) -> PersonRepository: ...

    def user_repository(self) -> UserRepository: ...

    def admin_repository(self) -> AdminRepository: ...

    def role_repository(self) -> RoleRepository: ...

    def product_repository(self) -> ProductRepository: ...

    def category_repository(self) -> CategoryRepository: ...

    def rating_repository(self) -> RatingRepository: ...
