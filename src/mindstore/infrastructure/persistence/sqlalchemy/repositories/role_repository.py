"""SQLAlchemy implementation of RoleRepository."""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from mindstore.domain.person import Role, RoleName, RoleRepository
from mindstore.infrastructure.persistence.sqlalchemy.models import RoleModel

logger = logging.getLogger(__name__)


class RoleRepositorySQLAlchemy(RoleRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, role_id: int) -> Optional[Role]:
        model = await self._session.get(RoleModel, role_id)
        if model is None:
            return None
        return self._map_to_domain(model)

    async def list_all(self) -> list[Role]:
        result = await self._session.execute(select(RoleModel).order_by(RoleModel.id))
        return [self._map_to_domain(m) for m in result.scalars().all()]

    async def save(self, role: Role) -> Role:
        existing = await self._session.get(RoleModel, role.id)
        if existing is not None:
            return self._map_to_domain(existing)

        model = RoleModel(id=role.id, name=role.name.value)
        self._session.add(model)
        await self._session.flush()
        logger.info("Created role %s (%s)", role.id, role.name.value)
        return role

    @staticmethod
    def _map_to_domain(model: RoleModel) -> Role:
        return Role(id=model.id, name=RoleName(model.name))
