"""FastAPI dependency injection for the MindStore API.

Provides dependencies for:
- Database sessions
- Security services (password hashing, JWT)
- The calling admin, resolved from the bearer token
- AdminService instances bound to the request session
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Annotated, AsyncGenerator

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from mindstore.application.context import CallerContext
from mindstore.application.services import AdminService, RequestValidator
from mindstore.infrastructure.persistence.sqlalchemy.repositories import (
    AdminRepositorySQLAlchemy,
    SQLAlchemyRepositoryFactory,
)
from mindstore.infrastructure.security import (
    InvalidTokenError,
    JWTService,
    PasswordHashingService,
)
from mindstore_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

# Security scheme for JWT Bearer tokens
security = HTTPBearer(auto_error=False)


@lru_cache()
def get_database_url() -> str:
    """Get the database URL, creating the SQLite data directory if needed."""
    url = get_settings().database_url

    if url.startswith("sqlite"):
        db_path = url.split("///")[-1]
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    return url


# -----------------------------------------------------------------------------
# Database Engine & Session (Singleton)
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """Get the shared async database engine (singleton)."""
    return create_async_engine(
        get_database_url(),
        echo=False,
        pool_pre_ping=True,  # Verify connections before use
    )


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Yield one session per request from the shared pool."""
    async with get_session_maker()() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


# -----------------------------------------------------------------------------
# Settings & Security Services
# -----------------------------------------------------------------------------


def get_api_settings() -> Settings:
    return get_settings()


def get_jwt_service(
    settings: Settings = Depends(get_api_settings),
) -> JWTService:
    """Get JWT service configured with API settings."""
    return JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        access_token_expire_hours=settings.jwt_access_token_expire_hours,
    )


def get_password_service(
    settings: Settings = Depends(get_api_settings),
) -> PasswordHashingService:
    return PasswordHashingService(rounds=settings.bcrypt_rounds)


# -----------------------------------------------------------------------------
# Calling Admin (JWT Authentication)
# -----------------------------------------------------------------------------


async def get_caller_context(
    session: DBSession,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    jwt_service: JWTService = Depends(get_jwt_service),
) -> CallerContext:
    """Resolve the bearer token into the calling admin.

    Raises
    ------
    HTTPException
        401 if the token is missing or invalid;
        403 if no admin matches the token subject (a plain user, or an
        admin that no longer exists)
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        payload = jwt_service.verify_token(credentials.credentials)
    except InvalidTokenError as e:
        logger.warning("Invalid token: %s", e)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        ) from e

    admin = await AdminRepositorySQLAlchemy(session).find_by_id(payload.person_id)
    if admin is None:
        # Either the account is gone or the token was issued to a plain user
        logger.warning("No admin found for token subject: %s", payload.person_id)
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )

    return CallerContext(
        person_id=payload.person_id,
        email=admin.email,
        role=admin.role.name,
    )


# Type alias for the authenticated admin
AdminCaller = Annotated[CallerContext, Depends(get_caller_context)]


# -----------------------------------------------------------------------------
# Application Services
# -----------------------------------------------------------------------------


def get_admin_service(
    session: DBSession,
    password_service: PasswordHashingService = Depends(get_password_service),
    settings: Settings = Depends(get_api_settings),
) -> AdminService:
    return AdminService.from_factory(
        SQLAlchemyRepositoryFactory(session),
        password_hasher=password_service,
        request_validator=RequestValidator.from_settings(settings),
    )


AdminServiceDep = Annotated[AdminService, Depends(get_admin_service)]
