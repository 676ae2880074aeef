"""SQLAlchemy implementations of the person repositories.

Users and admins share the ``persons`` table; each scoped repository
only ever sees rows of its own ``kind``.
"""

import logging
from typing import ClassVar, Generic, Optional, TypeVar

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from mindstore.domain.person import (
    Admin,
    AdminNotFoundError,
    AdminRepository,
    EmailAlreadyExistsError,
    Person,
    PersonRepository,
    Role,
    RoleName,
    RoleNotFoundError,
    User,
    UserNotFoundError,
    UserRepository,
)
from mindstore.domain.shared.exceptions import EntityNotFoundError
from mindstore.domain.shared.value_objects import PageRequest
from mindstore.infrastructure.persistence.sqlalchemy.models import (
    PersonModel,
    RoleModel,
)
from mindstore.infrastructure.persistence.sqlalchemy.repositories._utils import (
    apply_page,
    is_unique_violation,
)

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=Person)

_PERSON_CLASSES: dict[str, type[Person]] = {
    User.KIND: User,
    Admin.KIND: Admin,
}

_SORT_COLUMNS = {
    "id": PersonModel.id,
    "name": PersonModel.name,
    "email": PersonModel.email,
}


def _map_to_domain(model: PersonModel) -> Person:
    person_cls = _PERSON_CLASSES[model.kind]
    return person_cls.reconstitute(
        id=model.id,
        name=model.name,
        email=model.email,
        password_hash=model.password_hash,
        role=Role(id=model.role.id, name=RoleName(model.role.name)),
    )


class PersonRepositorySQLAlchemy(PersonRepository):
    """Unscoped lookups across users and admins."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_email(self, email: str) -> Optional[Person]:
        stmt = select(PersonModel).where(PersonModel.email == email)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return _map_to_domain(model)


class _ScopedPersonRepository(Generic[P]):
    """Common queries for one person kind."""

    _KIND: ClassVar[str]
    _NOT_FOUND: ClassVar[type[EntityNotFoundError]]

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, person_id: int) -> Optional[P]:
        model = await self._find_model_by_id(person_id)
        if model is None:
            return None
        return _map_to_domain(model)  # type: ignore[return-value]

    async def find_by_email(self, email: str) -> Optional[P]:
        stmt = select(PersonModel).where(
            PersonModel.kind == self._KIND,
            PersonModel.email == email,
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return _map_to_domain(model)  # type: ignore[return-value]

    async def save(self, person: P) -> P:
        role_model = await self._session.get(RoleModel, person.role.id)
        if role_model is None:
            raise RoleNotFoundError(person.role.id)

        try:
            if person.id is None:
                model = PersonModel(
                    kind=self._KIND,
                    name=person.name,
                    email=person.email,
                    password_hash=person.password_hash,
                    role=role_model,
                )
                self._session.add(model)
                await self._session.flush()
                logger.info(
                    "Created %s: %s (email: %s)",
                    self._KIND,
                    model.id,
                    model.email,
                )
            else:
                model = await self._find_model_by_id(person.id)
                if model is None:
                    raise self._NOT_FOUND(person.id)
                model.name = person.name
                model.email = person.email
                model.password_hash = person.password_hash
                model.role = role_model
                await self._session.flush()
                logger.debug("Updated %s: %s", self._KIND, model.id)
        except IntegrityError as e:
            if is_unique_violation(e, "email"):
                raise EmailAlreadyExistsError(person.email) from e
            raise

        return _map_to_domain(model)  # type: ignore[return-value]

    async def _find_model_by_id(self, person_id: int) -> Optional[PersonModel]:
        stmt = select(PersonModel).where(
            PersonModel.kind == self._KIND,
            PersonModel.id == person_id,
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()


class UserRepositorySQLAlchemy(_ScopedPersonRepository[User], UserRepository):
    """SQLAlchemy implementation of the UserRepository interface."""

    _KIND = User.KIND
    _NOT_FOUND = UserNotFoundError

    async def search_by_name(self, name: str) -> list[User]:
        stmt = (
            select(PersonModel)
            .where(
                PersonModel.kind == self._KIND,
                func.lower(PersonModel.name).contains(name.lower(), autoescape=True),
            )
            .order_by(PersonModel.id)
        )
        result = await self._session.execute(stmt)
        return [_map_to_domain(m) for m in result.scalars().all()]  # type: ignore[misc]

    async def find_page(self, page_request: PageRequest) -> list[User]:
        stmt = apply_page(
            select(PersonModel).where(PersonModel.kind == self._KIND),
            page_request,
            _SORT_COLUMNS,
            PersonModel.id,
        )
        result = await self._session.execute(stmt)
        return [_map_to_domain(m) for m in result.scalars().all()]  # type: ignore[misc]


class AdminRepositorySQLAlchemy(_ScopedPersonRepository[Admin], AdminRepository):
    """SQLAlchemy implementation of the AdminRepository interface."""

    _KIND = Admin.KIND
    _NOT_FOUND = AdminNotFoundError
