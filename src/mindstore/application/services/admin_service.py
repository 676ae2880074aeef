"""Admin use cases over users, admins, products and categories.

Every operation follows one of a few shapes:

- list: validate listing parameters, fetch one sorted page, convert
- search: fetch all matches, fail with not-found when there are none
- get: resolve by id, convert
- create: uniqueness check, resolve references, persist, convert
- update: resolve by id, uniqueness check on the new value, merge, persist
- delete: resolve by title, delete the product and its rating

Failures are raised where they are detected and never recovered here.
The service flushes through its repositories but does not commit; the
caller owns the transaction.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import TYPE_CHECKING, Mapping, Optional, Union

from mindstore.application.context import CallerContext
from mindstore.application.dtos import (
    AdminDTO,
    CategoryDTO,
    PersonCreateDTO,
    PersonUpdateDTO,
    ProductCreateDTO,
    ProductDTO,
    ProductUpdateDTO,
    UserDTO,
)
from mindstore.application.ports import PasswordHasher
from mindstore.application.services.entity_resolver import EntityResolver
from mindstore.application.services.request_validator import (
    Number,
    RequestValidator,
    UniquenessValidator,
)
from mindstore.domain.catalog import (
    PRODUCT_SORT_FIELDS,
    Category,
    CategoryAlreadyExistsError,
    CategoryNotFoundError,
    CategoryRepository,
    Product,
    ProductNotFoundError,
    ProductRepository,
    Rating,
    RatingRepository,
)
from mindstore.domain.person import (
    DEFAULT_ROLE_TABLE,
    USER_SORT_FIELDS,
    Admin,
    AdminRepository,
    PersonRepository,
    Role,
    RoleName,
    RoleRepository,
    User,
    UserNotFoundError,
    UserRepository,
)
from mindstore.domain.shared.exceptions import UnauthorizedError
from mindstore.domain.shared.value_objects import PageRequest

if TYPE_CHECKING:
    from mindstore.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class AdminService:
    """Back-office operations exposed to the admin API and CLI."""

    def __init__(  # NOQA: PLR0913
        self,
        person_repository: PersonRepository,
        user_repository: UserRepository,
        admin_repository: AdminRepository,
        role_repository: RoleRepository,
        product_repository: ProductRepository,
        category_repository: CategoryRepository,
        rating_repository: RatingRepository,
        password_hasher: PasswordHasher,
        request_validator: Optional[RequestValidator] = None,
        role_table: Mapping[RoleName, int] = DEFAULT_ROLE_TABLE,
    ):
        self._user_repo = user_repository
        self._admin_repo = admin_repository
        self._product_repo = product_repository
        self._category_repo = category_repository
        self._rating_repo = rating_repository
        self._hasher = password_hasher
        self._validator = request_validator or RequestValidator()
        self._role_table = role_table
        self._resolver = EntityResolver(
            product_repository=product_repository,
            category_repository=category_repository,
            user_repository=user_repository,
            role_repository=role_repository,
            admin_repository=admin_repository,
        )
        self._uniqueness = UniquenessValidator(
            person_repository=person_repository,
            product_repository=product_repository,
        )

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        password_hasher: PasswordHasher,
        request_validator: Optional[RequestValidator] = None,
    ) -> AdminService:
        return cls(
            person_repository=factory.person_repository(),
            user_repository=factory.user_repository(),
            admin_repository=factory.admin_repository(),
            role_repository=factory.role_repository(),
            product_repository=factory.product_repository(),
            category_repository=factory.category_repository(),
            rating_repository=factory.rating_repository(),
            password_hasher=password_hasher,
            request_validator=request_validator,
        )

    @property
    def resolver(self) -> EntityResolver:
        return self._resolver

    # ------------------------------------------------------------------
    # Products
    # ------------------------------------------------------------------

    async def get_all_products(
        self,
        direction: str,
        field: str,
        page: int,
        page_size: int,
    ) -> list[ProductDTO]:
        page_request = self._validator.page_request(
            direction=direction,
            field=field,
            page=page,
            page_size=page_size,
            allowed_fields=PRODUCT_SORT_FIELDS,
            case_insensitive=True,
        )
        products = await self._product_repo.find_page(page_request)
        return [ProductDTO.from_entity(p) for p in products]

    async def get_all_products_by_price(
        self,
        direction: str,
        page: int,
        page_size: int,
        min_price: Number,
        max_price: Number,
    ) -> list[ProductDTO]:
        """Fetch one page ordered by price, then keep products in range.

        The range filter applies to the fetched page only, so a page may
        hold fewer than ``page_size`` items.
        """
        self._validator.validate_pages(page, page_size)
        self._validator.validate_price_range(min_price, max_price)
        sort_direction = self._validator.parse_direction(direction)

        page_request = PageRequest(
            page=page,
            page_size=page_size,
            sort_field="price",
            direction=sort_direction,
        )
        products = await self._product_repo.find_page(page_request)

        low, high = Decimal(str(min_price)), Decimal(str(max_price))
        return [
            ProductDTO.from_entity(p)
            for p in products
            if p.is_priced_between(low, high)
        ]

    async def get_product_by_id(self, product_id: int) -> ProductDTO:
        product = await self._resolver.product(product_id)
        return ProductDTO.from_entity(product)

    async def get_products_by_name(self, title: str) -> list[ProductDTO]:
        products = await self._product_repo.search_by_title(title)
        if not products:
            raise ProductNotFoundError(title=title)
        return [ProductDTO.from_entity(p) for p in products]

    async def add_product(self, dto: ProductCreateDTO) -> ProductDTO:
        await self._uniqueness.ensure_title_available(dto.title)
        category = await self._category_by_name(dto.category)

        product = Product.create(
            title=dto.title,
            price=dto.price,
            category=category,
            description=dto.description,
            image=dto.image,
        )
        rating = await self._rating_repo.save(Rating.empty())
        product.attach_rating(rating)

        saved = await self._product_repo.save(product)
        logger.info("Created product %s (title: %s)", saved.id, saved.title)
        return ProductDTO.from_entity(saved)

    async def update_product(
        self,
        product_id: int,
        dto: ProductUpdateDTO,
    ) -> ProductDTO:
        product = await self._resolver.product(product_id)

        if dto.title is not None:
            await self._uniqueness.ensure_title_available(
                dto.title,
                exclude_id=product.id,
            )
        if dto.category is not None:
            product.move_to(await self._category_by_name(dto.category))
        dto.apply_to(product)

        saved = await self._product_repo.save(product)
        logger.info("Updated product %s", saved.id)
        return ProductDTO.from_entity(saved)

    async def delete_product(self, title: str) -> None:
        """Delete the product titled ``title`` together with its rating."""
        product = await self._product_repo.find_by_title(title)
        if product is None or product.id is None:
            raise ProductNotFoundError(title=title)

        await self._product_repo.delete(product.id)
        if product.rating.id is not None:
            await self._rating_repo.delete(product.rating.id)
        logger.info("Deleted product %s (title: %s)", product.id, title)

    # ------------------------------------------------------------------
    # Categories
    # ------------------------------------------------------------------

    async def get_all_categories(self) -> list[CategoryDTO]:
        categories = await self._category_repo.list_all()
        return [CategoryDTO.from_entity(c) for c in categories]

    async def add_category(self, name: str) -> CategoryDTO:
        category = Category(name=name.strip())
        if await self._category_repo.find_by_name(category.name) is not None:
            raise CategoryAlreadyExistsError(category.name)

        saved = await self._category_repo.save(category)
        logger.info("Created category %s (name: %s)", saved.id, saved.name)
        return CategoryDTO.from_entity(saved)

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    async def get_all_users(
        self,
        direction: str,
        field: str,
        page: int,
        page_size: int,
    ) -> list[UserDTO]:
        page_request = self._validator.page_request(
            direction=direction,
            field=field,
            page=page,
            page_size=page_size,
            allowed_fields=USER_SORT_FIELDS,
        )
        users = await self._user_repo.find_page(page_request)
        return [UserDTO.from_user(u) for u in users]

    async def get_user_by_id(self, user_id: int) -> UserDTO:
        user = await self._resolver.user(user_id)
        return UserDTO.from_user(user)

    async def get_users_by_name(self, name: str) -> list[UserDTO]:
        users = await self._user_repo.search_by_name(name)
        if not users:
            raise UserNotFoundError()
        return [UserDTO.from_user(u) for u in users]

    async def add_user(self, dto: PersonCreateDTO) -> UserDTO:
        await self._uniqueness.ensure_email_available(dto.email)
        role = await self._role_for(RoleName.USER)

        user = User.create(
            name=dto.name,
            email=dto.email,
            password_hash=self._hasher.hash(dto.password),
            role=role,
        )

        saved = await self._user_repo.save(user)
        logger.info("Created user %s (email: %s)", saved.id, saved.email)
        return UserDTO.from_user(saved)

    async def update_user(self, user_id: int, dto: PersonUpdateDTO) -> UserDTO:
        user = await self._resolver.user(user_id)
        await self._merge_person_update(user, dto)

        saved = await self._user_repo.save(user)
        logger.info("Updated user %s", saved.id)
        return UserDTO.from_user(saved)

    # ------------------------------------------------------------------
    # Admins
    # ------------------------------------------------------------------

    async def add_admin(self, dto: PersonCreateDTO) -> AdminDTO:
        await self._uniqueness.ensure_email_available(dto.email)
        role = await self._role_for(RoleName.ADMIN)

        admin = Admin.create(
            name=dto.name,
            email=dto.email,
            password_hash=self._hasher.hash(dto.password),
            role=role,
        )

        saved = await self._admin_repo.save(admin)
        logger.info("Created admin %s (email: %s)", saved.id, saved.email)
        return AdminDTO.from_admin(saved)

    async def update_admin(
        self,
        admin_id: int,
        dto: PersonUpdateDTO,
        caller: CallerContext,
    ) -> AdminDTO:
        """Update an admin record; admins may only update themselves."""
        if not caller.is_self(admin_id):
            logger.warning(
                "Admin %s tried to update admin %s",
                caller.person_id,
                admin_id,
            )
            raise UnauthorizedError(
                "Admins can only update their own account",
                details={"admin_id": admin_id, "caller_id": caller.person_id},
            )

        admin = await self._resolver.admin(admin_id)
        await self._merge_person_update(admin, dto)

        saved = await self._admin_repo.save(admin)
        logger.info("Updated admin %s", saved.id)
        return AdminDTO.from_admin(saved)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    async def _role_for(self, role_name: RoleName) -> Role:
        return await self._resolver.role(self._role_table[role_name])

    async def _category_by_name(self, name: str) -> Category:
        category = await self._category_repo.find_by_name(name)
        if category is None:
            raise CategoryNotFoundError(name=name)
        return category

    async def _merge_person_update(
        self,
        person: Union[User, Admin],
        dto: PersonUpdateDTO,
    ) -> None:
        if dto.email is not None:
            await self._uniqueness.ensure_email_available(
                dto.email,
                exclude_id=person.id,
            )
        dto.apply_to(person)
        if dto.password is not None:
            person.change_password_hash(self._hasher.hash(dto.password))
