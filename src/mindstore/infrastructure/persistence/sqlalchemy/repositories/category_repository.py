"""SQLAlchemy implementation of CategoryRepository."""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from mindstore.domain.catalog import (
    Category,
    CategoryAlreadyExistsError,
    CategoryNotFoundError,
    CategoryRepository,
)
from mindstore.infrastructure.persistence.sqlalchemy.models import CategoryModel
from mindstore.infrastructure.persistence.sqlalchemy.repositories._utils import (
    is_unique_violation,
)

logger = logging.getLogger(__name__)


class CategoryRepositorySQLAlchemy(CategoryRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, category_id: int) -> Optional[Category]:
        model = await self._session.get(CategoryModel, category_id)
        if model is None:
            return None
        return self._map_to_domain(model)

    async def find_by_name(self, name: str) -> Optional[Category]:
        stmt = select(CategoryModel).where(CategoryModel.name == name)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def list_all(self) -> list[Category]:
        stmt = select(CategoryModel).order_by(CategoryModel.name)
        result = await self._session.execute(stmt)
        return [self._map_to_domain(m) for m in result.scalars().all()]

    async def save(self, category: Category) -> Category:
        try:
            if category.id is None:
                model = CategoryModel(name=category.name)
                self._session.add(model)
            else:
                model = await self._session.get(CategoryModel, category.id)
                if model is None:
                    raise CategoryNotFoundError(category_id=category.id)
                model.name = category.name
            await self._session.flush()
        except IntegrityError as e:
            if is_unique_violation(e, "name"):
                raise CategoryAlreadyExistsError(category.name) from e
            raise

        logger.debug("Saved category %s (name: %s)", model.id, model.name)
        return self._map_to_domain(model)

    @staticmethod
    def _map_to_domain(model: CategoryModel) -> Category:
        return Category(id=model.id, name=model.name)
