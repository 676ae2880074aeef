"""SQLAlchemy implementation of ProductRepository."""

import logging
from decimal import Decimal
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from mindstore.domain.catalog import (
    Category,
    CategoryNotFoundError,
    Product,
    ProductAlreadyExistsError,
    ProductNotFoundError,
    ProductRepository,
    Rating,
)
from mindstore.domain.shared.value_objects import PageRequest
from mindstore.infrastructure.persistence.sqlalchemy.models import (
    CategoryModel,
    ProductModel,
    RatingModel,
)
from mindstore.infrastructure.persistence.sqlalchemy.repositories._utils import (
    apply_page,
    is_unique_violation,
)

logger = logging.getLogger(__name__)

_SORT_COLUMNS = {
    "id": ProductModel.id,
    "title": ProductModel.title,
    "price": ProductModel.price,
}


class ProductRepositorySQLAlchemy(ProductRepository):
    """SQLAlchemy implementation of the ProductRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, product_id: int) -> Optional[Product]:
        model = await self._session.get(ProductModel, product_id)
        if model is None:
            return None
        return self._map_to_domain(model)

    async def find_by_title(self, title: str) -> Optional[Product]:
        stmt = select(ProductModel).where(ProductModel.title == title)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def search_by_title(self, title: str) -> list[Product]:
        stmt = (
            select(ProductModel)
            .where(
                func.lower(ProductModel.title).contains(
                    title.lower(),
                    autoescape=True,
                ),
            )
            .order_by(ProductModel.id)
        )
        result = await self._session.execute(stmt)
        return [self._map_to_domain(m) for m in result.scalars().all()]

    async def find_page(self, page_request: PageRequest) -> list[Product]:
        stmt = apply_page(
            select(ProductModel),
            page_request,
            _SORT_COLUMNS,
            ProductModel.id,
        )
        result = await self._session.execute(stmt)
        return [self._map_to_domain(m) for m in result.scalars().all()]

    async def save(self, product: Product) -> Product:
        category_model = await self._get_category_model(product.category)
        rating_model = await self._get_rating_model(product.rating)

        try:
            if product.id is None:
                model = ProductModel(
                    title=product.title,
                    price=product.price,
                    description=product.description,
                    image=product.image,
                    category=category_model,
                    rating=rating_model,
                )
                self._session.add(model)
                await self._session.flush()
                logger.info("Created product: %s (title: %s)", model.id, model.title)
            else:
                model = await self._session.get(ProductModel, product.id)
                if model is None:
                    raise ProductNotFoundError(product_id=product.id)
                model.title = product.title
                model.price = product.price
                model.description = product.description
                model.image = product.image
                model.category = category_model
                model.rating = rating_model
                await self._session.flush()
                logger.debug("Updated product: %s", model.id)
        except IntegrityError as e:
            if is_unique_violation(e, "title"):
                raise ProductAlreadyExistsError(product.title) from e
            raise

        return self._map_to_domain(model)

    async def delete(self, product_id: int) -> None:
        model = await self._session.get(ProductModel, product_id)
        if model is None:
            raise ProductNotFoundError(product_id=product_id)

        await self._session.delete(model)
        await self._session.flush()
        logger.info("Deleted product: %s", product_id)

    async def _get_category_model(self, category: Category) -> CategoryModel:
        model = None
        if category.id is not None:
            model = await self._session.get(CategoryModel, category.id)
        if model is None:
            raise CategoryNotFoundError(category_id=category.id, name=category.name)
        return model

    async def _get_rating_model(self, rating: Rating) -> RatingModel:
        model = None
        if rating.id is not None:
            model = await self._session.get(RatingModel, rating.id)
        if model is None:
            msg = "A product's rating must be persisted before the product"
            raise ValueError(msg)
        return model

    @staticmethod
    def _map_to_domain(model: ProductModel) -> Product:
        return Product(
            id=model.id,
            title=model.title,
            price=Decimal(str(model.price)),
            description=model.description,
            image=model.image,
            category=Category(id=model.category.id, name=model.category.name),
            rating=Rating(
                id=model.rating.id,
                rate=model.rating.rate,
                count=model.rating.count,
            ),
        )
