"""Root pytest configuration.

Test Structure:
    tests/
    ├── unit/              # Fast, isolated tests (AsyncMock repositories)
    ├── integration/       # Tests against in-memory SQLite (aiosqlite)
    │   ├── persistence/   # Repository behaviour
    │   ├── application/   # AdminService end to end
    │   └── api/           # FastAPI app through httpx
    └── shared/            # Shared fixtures and test data
"""

import os

import pytest

# Settings refuse to load without a signing key
os.environ.setdefault("JWT_SECRET_KEY", "test-jwt-secret-for-testing-only")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

from mindstore_config import clear_settings_cache  # noqa: E402

from tests.shared.fixtures.database import (  # noqa: E402, F401
    async_engine,
    db_session,
    session_maker,
)


@pytest.fixture(scope="session", autouse=True)
def configure_app_settings():
    """Make every test start from freshly loaded settings."""
    clear_settings_cache()
    yield
    clear_settings_cache()
