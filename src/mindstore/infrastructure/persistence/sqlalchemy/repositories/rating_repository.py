"""SQLAlchemy implementation of RatingRepository."""

import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from mindstore.domain.catalog import Rating, RatingRepository
from mindstore.infrastructure.persistence.sqlalchemy.models import RatingModel

logger = logging.getLogger(__name__)


class RatingRepositorySQLAlchemy(RatingRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, rating_id: int) -> Optional[Rating]:
        model = await self._session.get(RatingModel, rating_id)
        if model is None:
            return None
        return self._map_to_domain(model)

    async def save(self, rating: Rating) -> Rating:
        model = None
        if rating.id is not None:
            model = await self._session.get(RatingModel, rating.id)

        if model is None:
            model = RatingModel(rate=rating.rate, count=rating.count)
            self._session.add(model)
        else:
            model.rate = rating.rate
            model.count = rating.count

        await self._session.flush()
        return self._map_to_domain(model)

    async def delete(self, rating_id: int) -> None:
        model = await self._session.get(RatingModel, rating_id)
        if model is None:
            return
        await self._session.delete(model)
        await self._session.flush()
        logger.debug("Deleted rating %s", rating_id)

    @staticmethod
    def _map_to_domain(model: RatingModel) -> Rating:
        return Rating(id=model.id, rate=model.rate, count=model.count)
