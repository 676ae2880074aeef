"""Admin back-office endpoints.

Every route requires an admin bearer token. Domain failures propagate to
the exception handlers, which map them to 400/403/404/409 responses.
"""

import logging
from decimal import Decimal
from typing import Annotated

from fastapi import APIRouter, Query, status

from mindstore.application.dtos import (
    PersonCreateDTO,
    PersonUpdateDTO,
    ProductCreateDTO,
    ProductUpdateDTO,
)
from mindstore.presentation.api.dependencies import (
    AdminCaller,
    AdminServiceDep,
    DBSession,
)
from mindstore.presentation.api.schemas.admin import (
    CategoryResponse,
    CreateCategoryRequest,
    CreatePersonRequest,
    CreateProductRequest,
    PersonResponse,
    ProductResponse,
    UpdatePersonRequest,
    UpdateProductRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["Admin"])

# Listing parameters are checked by the service so that bad values fail
# with the domain error codes rather than FastAPI's 422.
DirectionParam = Annotated[str, Query(description="'asc' or 'desc'")]
FieldParam = Annotated[str, Query(description="Field to sort by")]
PageParam = Annotated[int, Query(description="Page number (1-based)")]
PageSizeParam = Annotated[int, Query(description="Items per page")]


# -----------------------------------------------------------------------------
# Products
# -----------------------------------------------------------------------------


@router.get("/products", summary="List products")
async def list_products(
    _admin: AdminCaller,
    service: AdminServiceDep,
    direction: DirectionParam = "asc",
    field: FieldParam = "id",
    page: PageParam = 1,
    page_size: PageSizeParam = 10,
) -> list[ProductResponse]:
    products = await service.get_all_products(direction, field, page, page_size)
    return [ProductResponse.model_validate(p) for p in products]


@router.get(
    "/products/by-price",
    summary="List products ordered by price within a price range",
)
async def list_products_by_price(
    _admin: AdminCaller,
    service: AdminServiceDep,
    min_price: Annotated[Decimal, Query()],
    max_price: Annotated[Decimal, Query()],
    direction: DirectionParam = "asc",
    page: PageParam = 1,
    page_size: PageSizeParam = 10,
) -> list[ProductResponse]:
    """The range applies to the fetched page, so pages may be short."""
    products = await service.get_all_products_by_price(
        direction=direction,
        page=page,
        page_size=page_size,
        min_price=min_price,
        max_price=max_price,
    )
    return [ProductResponse.model_validate(p) for p in products]


@router.get("/products/search", summary="Search products by title")
async def search_products(
    _admin: AdminCaller,
    service: AdminServiceDep,
    title: Annotated[str, Query(min_length=1)],
) -> list[ProductResponse]:
    products = await service.get_products_by_name(title)
    return [ProductResponse.model_validate(p) for p in products]


@router.get("/products/{product_id}", summary="Get a product")
async def get_product(
    product_id: int,
    _admin: AdminCaller,
    service: AdminServiceDep,
) -> ProductResponse:
    return ProductResponse.model_validate(await service.get_product_by_id(product_id))


@router.post(
    "/products",
    status_code=status.HTTP_201_CREATED,
    summary="Create a product",
    responses={
        404: {"description": "Category not found"},
        409: {"description": "A product with this title already exists"},
    },
)
async def create_product(
    request: CreateProductRequest,
    admin: AdminCaller,
    service: AdminServiceDep,
    session: DBSession,
) -> ProductResponse:
    product = await service.add_product(
        ProductCreateDTO(
            title=request.title,
            price=request.price,
            category=request.category,
            description=request.description,
            image=request.image,
        ),
    )
    await session.commit()

    logger.info("Admin %s created product: %s", admin.email, product.title)
    return ProductResponse.model_validate(product)


@router.patch("/products/{product_id}", summary="Update a product")
async def update_product(
    product_id: int,
    request: UpdateProductRequest,
    admin: AdminCaller,
    service: AdminServiceDep,
    session: DBSession,
) -> ProductResponse:
    product = await service.update_product(
        product_id,
        ProductUpdateDTO(**request.model_dump(exclude_unset=True)),
    )
    await session.commit()

    logger.info("Admin %s updated product: %s", admin.email, product_id)
    return ProductResponse.model_validate(product)


@router.delete(
    "/products",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a product by title",
)
async def delete_product(
    admin: AdminCaller,
    service: AdminServiceDep,
    session: DBSession,
    title: Annotated[str, Query(min_length=1)],
) -> None:
    await service.delete_product(title)
    await session.commit()

    logger.info("Admin %s deleted product: %s", admin.email, title)


# -----------------------------------------------------------------------------
# Categories
# -----------------------------------------------------------------------------


@router.get("/categories", summary="List categories")
async def list_categories(
    _admin: AdminCaller,
    service: AdminServiceDep,
) -> list[CategoryResponse]:
    categories = await service.get_all_categories()
    return [CategoryResponse.model_validate(c) for c in categories]


@router.post(
    "/categories",
    status_code=status.HTTP_201_CREATED,
    summary="Create a category",
)
async def create_category(
    request: CreateCategoryRequest,
    admin: AdminCaller,
    service: AdminServiceDep,
    session: DBSession,
) -> CategoryResponse:
    category = await service.add_category(request.name)
    await session.commit()

    logger.info("Admin %s created category: %s", admin.email, category.name)
    return CategoryResponse.model_validate(category)


# -----------------------------------------------------------------------------
# Users
# -----------------------------------------------------------------------------


@router.get("/users", summary="List users")
async def list_users(
    _admin: AdminCaller,
    service: AdminServiceDep,
    direction: DirectionParam = "asc",
    field: FieldParam = "id",
    page: PageParam = 1,
    page_size: PageSizeParam = 10,
) -> list[PersonResponse]:
    users = await service.get_all_users(direction, field, page, page_size)
    return [PersonResponse.model_validate(u) for u in users]


@router.get("/users/search", summary="Search users by name")
async def search_users(
    _admin: AdminCaller,
    service: AdminServiceDep,
    name: Annotated[str, Query(min_length=1)],
) -> list[PersonResponse]:
    users = await service.get_users_by_name(name)
    return [PersonResponse.model_validate(u) for u in users]


@router.get("/users/{user_id}", summary="Get a user")
async def get_user(
    user_id: int,
    _admin: AdminCaller,
    service: AdminServiceDep,
) -> PersonResponse:
    return PersonResponse.model_validate(await service.get_user_by_id(user_id))


@router.post(
    "/users",
    status_code=status.HTTP_201_CREATED,
    summary="Create a user",
    responses={409: {"description": "Email already registered"}},
)
async def create_user(
    request: CreatePersonRequest,
    admin: AdminCaller,
    service: AdminServiceDep,
    session: DBSession,
) -> PersonResponse:
    user = await service.add_user(
        PersonCreateDTO(
            name=request.name,
            email=request.email,
            password=request.password,
        ),
    )
    await session.commit()

    logger.info("Admin %s created user: %s", admin.email, user.email)
    return PersonResponse.model_validate(user)


@router.patch("/users/{user_id}", summary="Update a user")
async def update_user(
    user_id: int,
    request: UpdatePersonRequest,
    admin: AdminCaller,
    service: AdminServiceDep,
    session: DBSession,
) -> PersonResponse:
    user = await service.update_user(
        user_id,
        PersonUpdateDTO(**request.model_dump(exclude_unset=True)),
    )
    await session.commit()

    logger.info("Admin %s updated user: %s", admin.email, user_id)
    return PersonResponse.model_validate(user)


# -----------------------------------------------------------------------------
# Admins
# -----------------------------------------------------------------------------


@router.post(
    "/admins",
    status_code=status.HTTP_201_CREATED,
    summary="Create an admin",
    responses={409: {"description": "Email already registered"}},
)
async def create_admin(
    request: CreatePersonRequest,
    admin: AdminCaller,
    service: AdminServiceDep,
    session: DBSession,
) -> PersonResponse:
    created = await service.add_admin(
        PersonCreateDTO(
            name=request.name,
            email=request.email,
            password=request.password,
        ),
    )
    await session.commit()

    logger.info("Admin %s created admin: %s", admin.email, created.email)
    return PersonResponse.model_validate(created)


@router.patch(
    "/admins/{admin_id}",
    summary="Update your own admin account",
    responses={403: {"description": "Admins can only update themselves"}},
)
async def update_admin(
    admin_id: int,
    request: UpdatePersonRequest,
    admin: AdminCaller,
    service: AdminServiceDep,
    session: DBSession,
) -> PersonResponse:
    updated = await service.update_admin(
        admin_id,
        PersonUpdateDTO(**request.model_dump(exclude_unset=True)),
        caller=admin,
    )
    await session.commit()

    return PersonResponse.model_validate(updated)
