"""Pytest fixtures for API integration tests.

The app runs in-process through httpx's ASGITransport so requests share
the event loop (and the in-memory database) of the test.
"""

import pytest
from httpx import ASGITransport, AsyncClient

from mindstore.application.dtos import PersonCreateDTO
from mindstore.application.services import AdminService
from mindstore.domain.person import RoleName
from mindstore.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)
from mindstore.infrastructure.security import JWTService, PasswordHashingService
from mindstore.presentation.api.app import API_V1_PREFIX, create_app
from mindstore.presentation.api.dependencies import get_db_session
from mindstore_config.settings import get_settings
from tests.shared.fixtures.factories import TEST_PASSWORD

ADMIN_EMAIL = "admin@example.com"
OTHER_ADMIN_EMAIL = "other-admin@example.com"
USER_EMAIL = "user@example.com"


@pytest.fixture
def api_v1_prefix() -> str:
    return API_V1_PREFIX


@pytest.fixture
def jwt_service() -> JWTService:
    settings = get_settings()
    return JWTService(secret_key=settings.jwt_secret_key.get_secret_value())


@pytest.fixture
async def seeded(session_maker) -> dict:
    """Seed categories, two admins and a user; return their ids."""
    async with session_maker() as session:
        service = AdminService.from_factory(
            SQLAlchemyRepositoryFactory(session),
            password_hasher=PasswordHashingService(rounds=4),
        )
        await service.add_category("Tools")
        admin = await service.add_admin(
            PersonCreateDTO(name="Ada", email=ADMIN_EMAIL, password=TEST_PASSWORD),
        )
        other = await service.add_admin(
            PersonCreateDTO(
                name="Otto",
                email=OTHER_ADMIN_EMAIL,
                password=TEST_PASSWORD,
            ),
        )
        user = await service.add_user(
            PersonCreateDTO(name="Uma", email=USER_EMAIL, password=TEST_PASSWORD),
        )
        await session.commit()

    return {"admin_id": admin.id, "other_admin_id": other.id, "user_id": user.id}


@pytest.fixture
def admin_headers(seeded, jwt_service) -> dict:
    token = jwt_service.create_access_token(
        seeded["admin_id"],
        ADMIN_EMAIL,
        RoleName.ADMIN,
    )
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_headers(seeded, jwt_service) -> dict:
    token = jwt_service.create_access_token(
        seeded["user_id"],
        USER_EMAIL,
        RoleName.USER,
    )
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
async def client(session_maker):
    """Create a client whose requests use the in-memory database."""
    app = create_app()

    async def override_get_db_session():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
