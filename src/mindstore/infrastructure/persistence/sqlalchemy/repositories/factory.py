"""SQLAlchemy repository factory bound to one session."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from mindstore.infrastructure.persistence.sqlalchemy.repositories.category_repository import (  # NOQA: E501
    CategoryRepositorySQLAlchemy,
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


class SQLAlchemyRepositoryFactory:
    """SQLAlchemy implementation of the RepositoryFactory Protocol."""

    def __init__(self, session: AsyncSession):
        self._session = session

        # Cached instances (created on demand)
        self._person_repo: PersonRepositorySQLAlchemy | None = None
        self._user_repo: UserRepositorySQLAlchemy | None = None
        self._admin_repo: AdminRepositorySQLAlchemy | None = None
        self._role_repo: RoleRepositorySQLAlchemy | None = None
        self._product_repo: ProductRepositorySQLAlchemy | None = None
        self._category_repo: CategoryRepositorySQLAlchemy | None = None
        self._rating_repo: RatingRepositorySQLAlchemy | None = None

    @property
    def session(self) -> AsyncSession:
        return self._session

    def person_repository(self) -> PersonRepositorySQLAlchemy:
        if self._person_repo is None:
            self._person_repo = PersonRepositorySQLAlchemy(self._session)
        return self._person_repo

    def user_repository(self) -> UserRepositorySQLAlchemy:
        if self._user_repo is None:
            self._user_repo = UserRepositorySQLAlchemy(self._session)
        return self._user_repo

    def admin_repository(self) -> AdminRepositorySQLAlchemy:
        if self._admin_repo is None:
            self._admin_repo = AdminRepositorySQLAlchemy(self._session)
        return self._admin_repo

    def role_repository(self) -> RoleRepositorySQLAlchemy:
        if self._role_repo is None:
            self._role_repo = RoleRepositorySQLAlchemy(self._session)
        return self._role_repo

    def product_repository(self) -> ProductRepositorySQLAlchemy:
        if self._product_repo is None:
            self._product_repo = ProductRepositorySQLAlchemy(self._session)
        return self._product_repo

    def category_repository(self) -> CategoryRepositorySQLAlchemy:
        if self._category_repo is None:
            self._category_repo = CategoryRepositorySQLAlchemy(self._session)
        return self._category_repo

    def rating_repository(self) -> RatingRepositorySQLAlchemy:
        if self._rating_repo is None:
            self._rating_repo = RatingRepositorySQLAlchemy(self._session)
        return self._rating_repo
