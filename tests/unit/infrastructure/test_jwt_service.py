"""Unit tests for JWTService."""

from datetime import timedelta

import jwt
import pytest

from mindstore.domain.person import RoleName
from mindstore.infrastructure.security import InvalidTokenError, JWTService

SECRET = "test-jwt-secret-for-testing-only"


@pytest.fixture
def service() -> JWTService:
    return JWTService(secret_key=SECRET)


def test_round_trip_claims(service):
    token = service.create_access_token(10, "admin@example.com", RoleName.ADMIN)

    payload = service.verify_token(token)

    assert payload.person_id == 10
    assert payload.email == "admin@example.com"
    assert payload.role is RoleName.ADMIN


def test_expired_token(service):
    token = service.create_access_token(
        10,
        "admin@example.com",
        RoleName.ADMIN,
        expires_delta=timedelta(seconds=-1),
    )

    with pytest.raises(InvalidTokenError, match="expired"):
        service.verify_token(token)


def test_token_signed_with_other_key(service):
    token = JWTService(secret_key="another-secret").create_access_token(
        10,
        "admin@example.com",
        RoleName.ADMIN,
    )

    with pytest.raises(InvalidTokenError):
        service.verify_token(token)


def test_malformed_payload(service):
    token = jwt.encode({"sub": "10", "exp": 9999999999}, SECRET, algorithm="HS256")

    with pytest.raises(InvalidTokenError, match="Malformed"):
        service.verify_token(token)


def test_empty_secret_rejected():
    with pytest.raises(ValueError):
        JWTService(secret_key="")
