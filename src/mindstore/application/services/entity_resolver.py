"""Resolve identifiers into entities or a typed not-found failure."""

from enum import Enum
from typing import Callable

from mindstore.domain.catalog import (
    Category,
    CategoryNotFoundError,
    CategoryRepository,
    Product,
    ProductNotFoundError,
    ProductRepository,
)
from mindstore.domain.person import (
    Admin,
    AdminNotFoundError,
    AdminRepository,
    Role,
    RoleNotFoundError,
    RoleRepository,
    User,
    UserNotFoundError,
    UserRepository,
)
from mindstore.domain.shared.exceptions import EntityNotFoundError


class EntityKind(str, Enum):
    PRODUCT = "product"
    CATEGORY = "category"
    USER = "user"
    ROLE = "role"
    ADMIN = "admin"


class EntityResolver:
    """Look up entities by primary key, raising when they are absent.

    Every use case goes through this class so that a missing resource
    always surfaces as the same kind-specific EntityNotFoundError.
    """

    def __init__(
        self,
        product_repository: ProductRepository,
        category_repository: CategoryRepository,
        user_repository: UserRepository,
        role_repository: RoleRepository,
        admin_repository: AdminRepository,
    ):
        self._product_repo = product_repository
        self._category_repo = category_repository
        self._user_repo = user_repository
        self._role_repo = role_repository
        self._admin_repo = admin_repository

    async def resolve(self, kind: EntityKind, entity_id: int):
        lookup, not_found = self._lookups()[kind]
        entity = await lookup(entity_id)
        if entity is None:
            raise not_found(entity_id)
        return entity

    async def product(self, product_id: int) -> Product:
        return await self.resolve(EntityKind.PRODUCT, product_id)

    async def category(self, category_id: int) -> Category:
        return await self.resolve(EntityKind.CATEGORY, category_id)

    async def user(self, user_id: int) -> User:
        return await self.resolve(EntityKind.USER, user_id)

    async def role(self, role_id: int) -> Role:
        return await self.resolve(EntityKind.ROLE, role_id)

    async def admin(self, admin_id: int) -> Admin:
        return await self.resolve(EntityKind.ADMIN, admin_id)

    def _lookups(
        self,
    ) -> dict[EntityKind, tuple[Callable, Callable[[int], EntityNotFoundError]]]:
        return {
            EntityKind.PRODUCT: (self._product_repo.find_by_id, ProductNotFoundError),
            EntityKind.CATEGORY: (
                self._category_repo.find_by_id,
                CategoryNotFoundError,
            ),
            EntityKind.USER: (self._user_repo.find_by_id, UserNotFoundError),
            EntityKind.ROLE: (self._role_repo.find_by_id, RoleNotFoundError),
            EntityKind.ADMIN: (self._admin_repo.find_by_id, AdminNotFoundError),
        }
