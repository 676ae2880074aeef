"""Unit tests for AdminService with mocked repositories."""

from decimal import Decimal
from unittest.mock import AsyncMock, Mock

import pytest

from mindstore.application.context import CallerContext
from mindstore.application.dtos import (
    PersonCreateDTO,
    PersonUpdateDTO,
    ProductCreateDTO,
    ProductUpdateDTO,
)
from mindstore.application.services import AdminService
from mindstore.domain.catalog import (
    Category,
    CategoryAlreadyExistsError,
    CategoryNotFoundError,
    Product,
    ProductAlreadyExistsError,
    ProductNotFoundError,
    Rating,
)
from mindstore.domain.person import (
    Admin,
    AdminNotFoundError,
    EmailAlreadyExistsError,
    RoleName,
    User,
    UserNotFoundError,
)
from mindstore.domain.shared.exceptions import (
    InvalidParameterError,
    NotAllowedValueError,
    UnauthorizedError,
)
from mindstore.domain.shared.value_objects import SortDirection
from tests.shared.fixtures.factories import (
    ADMIN_ROLE,
    TEST_PASSWORD,
    USER_ROLE,
    TestCatalogFactory,
    TestPersonFactory,
)


def _with_id(person, new_id: int):
    return type(person).reconstitute(
        id=new_id,
        name=person.name,
        email=person.email,
        password_hash=person.password_hash,
        role=person.role,
    )


def _saved_product(product: Product, product_id: int = 1) -> Product:
    return Product(
        id=product_id,
        title=product.title,
        price=product.price,
        description=product.description,
        image=product.image,
        category=product.category,
        rating=product.rating,
    )


class AdminServiceTestCase:
    """Shared setup: every repository is an AsyncMock."""

    def setup_method(self):
        self.person_repo = AsyncMock()
        self.user_repo = AsyncMock()
        self.admin_repo = AsyncMock()
        self.role_repo = AsyncMock()
        self.product_repo = AsyncMock()
        self.category_repo = AsyncMock()
        self.rating_repo = AsyncMock()
        self.password_hasher = Mock()
        self.password_hasher.hash.return_value = "hashed_password"

        self.person_repo.find_by_email.return_value = None
        self.product_repo.find_by_title.return_value = None
        self.role_repo.find_by_id.side_effect = lambda role_id: {
            1: USER_ROLE,
            2: ADMIN_ROLE,
        }.get(role_id)

        self.service = AdminService(
            person_repository=self.person_repo,
            user_repository=self.user_repo,
            admin_repository=self.admin_repo,
            role_repository=self.role_repo,
            product_repository=self.product_repo,
            category_repository=self.category_repo,
            rating_repository=self.rating_repo,
            password_hasher=self.password_hasher,
        )


class TestProductListing(AdminServiceTestCase):
    @pytest.mark.asyncio
    async def test_get_all_products_passes_page_request(self):
        self.product_repo.find_page.return_value = [TestCatalogFactory.product()]

        products = await self.service.get_all_products("desc", "Title", 2, 5)

        page_request = self.product_repo.find_page.await_args.args[0]
        assert page_request.sort_field == "title"
        assert page_request.direction is SortDirection.DESC
        assert page_request.page == 2
        assert page_request.page_size == 5
        assert [p.title for p in products] == ["Widget"]

    @pytest.mark.asyncio
    async def test_get_all_products_unknown_field(self):
        with pytest.raises(InvalidParameterError):
            await self.service.get_all_products("asc", "rating", 1, 10)

        self.product_repo.find_page.assert_not_called()

    @pytest.mark.asyncio
    async def test_get_all_products_bad_direction_before_query(self):
        with pytest.raises(NotAllowedValueError, match="Direction not allowed"):
            await self.service.get_all_products("ASC", "id", 1, 10)

        self.product_repo.find_page.assert_not_called()

    @pytest.mark.asyncio
    async def test_get_all_products_page_out_of_range_before_query(self):
        with pytest.raises(InvalidParameterError, match="Page is out of range"):
            await self.service.get_all_products("asc", "id", 10**18, 10)

        self.product_repo.find_page.assert_not_called()

    @pytest.mark.asyncio
    async def test_by_price_rejects_negative_min_before_query(self):
        with pytest.raises(NotAllowedValueError):
            await self.service.get_all_products_by_price("desc", 1, 10, -1, 100)

        self.product_repo.find_page.assert_not_called()

    @pytest.mark.asyncio
    async def test_by_price_validates_pages_first(self):
        with pytest.raises(InvalidParameterError):
            await self.service.get_all_products_by_price("sideways", 0, 10, -1, 100)

    @pytest.mark.asyncio
    async def test_by_price_filters_fetched_page(self):
        self.product_repo.find_page.return_value = [
            TestCatalogFactory.product(1, "Cheap", "5"),
            TestCatalogFactory.product(2, "Mid", "50"),
            TestCatalogFactory.product(3, "Pricey", "500"),
        ]

        products = await self.service.get_all_products_by_price(
            "asc",
            1,
            10,
            Decimal("10"),
            Decimal("100"),
        )

        assert [p.title for p in products] == ["Mid"]
        page_request = self.product_repo.find_page.await_args.args[0]
        assert page_request.sort_field == "price"

    @pytest.mark.asyncio
    async def test_get_products_by_name_empty_raises(self):
        self.product_repo.search_by_title.return_value = []

        with pytest.raises(ProductNotFoundError):
            await self.service.get_products_by_name("nothing")

    @pytest.mark.asyncio
    async def test_get_product_by_id_missing(self):
        self.product_repo.find_by_id.return_value = None

        with pytest.raises(ProductNotFoundError):
            await self.service.get_product_by_id(99)


class TestAddProduct(AdminServiceTestCase):
    @pytest.mark.asyncio
    async def test_add_product_creates_empty_rating(self):
        self.category_repo.find_by_name.return_value = TestCatalogFactory.TOOLS
        self.rating_repo.save.return_value = Rating(id=5)
        self.product_repo.save.side_effect = lambda p: _saved_product(p, 11)

        dto = await self.service.add_product(
            ProductCreateDTO(title="Widget", price=Decimal("9.99"), category="Tools"),
        )

        assert dto.id == 11
        assert dto.category == "Tools"
        assert dto.rating.id == 5
        assert dto.rating.rate == 0.0
        assert dto.rating.count == 0
        saved_rating = self.rating_repo.save.await_args.args[0]
        assert saved_rating.is_empty

    @pytest.mark.asyncio
    async def test_duplicate_title_rejected_before_any_write(self):
        self.product_repo.find_by_title.return_value = TestCatalogFactory.product()

        with pytest.raises(ProductAlreadyExistsError):
            await self.service.add_product(
                ProductCreateDTO(title="Widget", price=Decimal("1"), category="Tools"),
            )

        self.rating_repo.save.assert_not_called()
        self.product_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_unknown_category(self):
        self.category_repo.find_by_name.return_value = None

        with pytest.raises(CategoryNotFoundError):
            await self.service.add_product(
                ProductCreateDTO(title="Widget", price=Decimal("1"), category="Nope"),
            )

        self.rating_repo.save.assert_not_called()


class TestUpdateAndDeleteProduct(AdminServiceTestCase):
    @pytest.mark.asyncio
    async def test_update_product_merges_fields(self):
        self.product_repo.find_by_id.return_value = TestCatalogFactory.product()
        self.category_repo.find_by_name.return_value = TestCatalogFactory.TOYS
        self.product_repo.save.side_effect = lambda p: p

        dto = await self.service.update_product(
            1,
            ProductUpdateDTO(price=Decimal("19.99"), category="Toys"),
        )

        assert dto.title == "Widget"
        assert dto.price == Decimal("19.99")
        assert dto.category == "Toys"

    @pytest.mark.asyncio
    async def test_update_product_keeping_own_title(self):
        product = TestCatalogFactory.product()
        self.product_repo.find_by_id.return_value = product
        self.product_repo.find_by_title.return_value = product
        self.product_repo.save.side_effect = lambda p: p

        dto = await self.service.update_product(1, ProductUpdateDTO(title="Widget"))

        assert dto.title == "Widget"

    @pytest.mark.asyncio
    async def test_update_product_to_taken_title(self):
        self.product_repo.find_by_id.return_value = TestCatalogFactory.product()
        self.product_repo.find_by_title.return_value = TestCatalogFactory.product(
            product_id=2,
            title="Gadget",
        )

        with pytest.raises(ProductAlreadyExistsError):
            await self.service.update_product(1, ProductUpdateDTO(title="Gadget"))

        self.product_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_delete_product_removes_rating(self):
        self.product_repo.find_by_title.return_value = TestCatalogFactory.product(
            product_id=3,
        )

        await self.service.delete_product("Widget")

        self.product_repo.delete.assert_awaited_once_with(3)
        self.rating_repo.delete.assert_awaited_once_with(3)

    @pytest.mark.asyncio
    async def test_delete_missing_product(self):
        with pytest.raises(ProductNotFoundError):
            await self.service.delete_product("Ghost")

        self.product_repo.delete.assert_not_called()


class TestCategories(AdminServiceTestCase):
    @pytest.mark.asyncio
    async def test_add_category(self):
        self.category_repo.find_by_name.return_value = None
        self.category_repo.save.return_value = Category(id=3, name="Books")

        dto = await self.service.add_category(" Books ")

        assert dto.id == 3
        assert self.category_repo.save.await_args.args[0].name == "Books"

    @pytest.mark.asyncio
    async def test_add_duplicate_category(self):
        self.category_repo.find_by_name.return_value = TestCatalogFactory.TOOLS

        with pytest.raises(CategoryAlreadyExistsError):
            await self.service.add_category("Tools")

    @pytest.mark.asyncio
    async def test_get_all_categories(self):
        self.category_repo.list_all.return_value = [
            TestCatalogFactory.TOOLS,
            TestCatalogFactory.TOYS,
        ]

        names = [c.name for c in await self.service.get_all_categories()]

        assert names == ["Tools", "Toys"]


class TestUsers(AdminServiceTestCase):
    @pytest.mark.asyncio
    async def test_add_user_hashes_password_and_uses_user_role(self):
        self.user_repo.save.side_effect = lambda u: _with_id(u, 1)

        dto = await self.service.add_user(
            PersonCreateDTO(
                name="Alice",
                email="alice@example.com",
                password=TEST_PASSWORD,
            ),
        )

        saved: User = self.user_repo.save.await_args.args[0]
        assert saved.password_hash == "hashed_password"
        assert saved.role.name is RoleName.USER
        assert dto.role == "USER"
        self.password_hasher.hash.assert_called_once_with(TEST_PASSWORD)

    @pytest.mark.asyncio
    async def test_add_user_with_taken_email(self):
        self.person_repo.find_by_email.return_value = TestPersonFactory.admin()

        with pytest.raises(EmailAlreadyExistsError):
            await self.service.add_user(
                PersonCreateDTO(
                    name="Eve",
                    email=TestPersonFactory.ADMIN_EMAIL,
                    password=TEST_PASSWORD,
                ),
            )

        self.user_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_get_all_users_field_is_case_sensitive(self):
        with pytest.raises(InvalidParameterError):
            await self.service.get_all_users("asc", "Name", 1, 10)

    @pytest.mark.asyncio
    async def test_get_users_by_name_empty_raises(self):
        self.user_repo.search_by_name.return_value = []

        with pytest.raises(UserNotFoundError):
            await self.service.get_users_by_name("zed")

    @pytest.mark.asyncio
    async def test_update_user_with_other_users_email(self):
        alice = TestPersonFactory.alice()
        self.user_repo.find_by_id.return_value = alice
        self.person_repo.find_by_email.return_value = TestPersonFactory.bob()

        with pytest.raises(EmailAlreadyExistsError):
            await self.service.update_user(
                alice.id,
                PersonUpdateDTO(email=TestPersonFactory.BOB_EMAIL),
            )

        assert alice.email == TestPersonFactory.ALICE_EMAIL
        self.user_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_update_user_with_own_email(self):
        alice = TestPersonFactory.alice()
        self.user_repo.find_by_id.return_value = alice
        self.person_repo.find_by_email.return_value = alice
        self.user_repo.save.side_effect = lambda u: u

        dto = await self.service.update_user(
            alice.id,
            PersonUpdateDTO(name="Alicia", email=TestPersonFactory.ALICE_EMAIL),
        )

        assert dto.name == "Alicia"
        assert dto.email == TestPersonFactory.ALICE_EMAIL

    @pytest.mark.asyncio
    async def test_update_user_rehashes_new_password(self):
        self.user_repo.find_by_id.return_value = TestPersonFactory.alice()
        self.user_repo.save.side_effect = lambda u: u
        self.password_hasher.hash.return_value = "new_hash"

        await self.service.update_user(1, PersonUpdateDTO(password="new-password"))

        saved: User = self.user_repo.save.await_args.args[0]
        assert saved.password_hash == "new_hash"


class TestAdmins(AdminServiceTestCase):
    @pytest.mark.asyncio
    async def test_add_admin_uses_admin_role(self):
        self.admin_repo.save.side_effect = lambda a: _with_id(a, 10)

        dto = await self.service.add_admin(
            PersonCreateDTO(name="Ada", email="ada@example.com", password=TEST_PASSWORD),
        )

        saved: Admin = self.admin_repo.save.await_args.args[0]
        assert saved.role.is_admin
        assert dto.role == "ADMIN"

    @pytest.mark.asyncio
    async def test_admin_can_update_self(self):
        admin = TestPersonFactory.admin()
        self.admin_repo.find_by_id.return_value = admin
        self.admin_repo.save.side_effect = lambda a: a
        caller = CallerContext(
            person_id=admin.id,
            email=admin.email,
            role=RoleName.ADMIN,
        )

        dto = await self.service.update_admin(
            admin.id,
            PersonUpdateDTO(name="Ada L."),
            caller=caller,
        )

        assert dto.name == "Ada L."

    @pytest.mark.asyncio
    async def test_admin_cannot_update_other_admin(self):
        caller = CallerContext(
            person_id=TestPersonFactory.ADMIN_ID,
            email=TestPersonFactory.ADMIN_EMAIL,
            role=RoleName.ADMIN,
        )

        with pytest.raises(UnauthorizedError):
            await self.service.update_admin(
                TestPersonFactory.OTHER_ADMIN_ID,
                PersonUpdateDTO(name="Hijacked"),
                caller=caller,
            )

        self.admin_repo.find_by_id.assert_not_called()
        self.admin_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_update_missing_admin(self):
        self.admin_repo.find_by_id.return_value = None
        caller = CallerContext(person_id=50, email="ghost@example.com")

        with pytest.raises(AdminNotFoundError):
            await self.service.update_admin(50, PersonUpdateDTO(), caller=caller)
