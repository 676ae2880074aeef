"""JWT access tokens for the admin API."""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from mindstore.domain.person import RoleName
from mindstore.infrastructure.security.exceptions import InvalidTokenError


@dataclass(frozen=True)
class TokenPayload:
    """Decoded claims of a verified access token."""

    person_id: int
    email: str
    role: RoleName
    exp: datetime


class JWTService:
    """Create and verify signed access tokens.

    Tokens carry the person id (``sub``), the email and the role name,
    so the API can build a CallerContext without a database round trip.
    """

    DEFAULT_ACCESS_EXPIRE_HOURS = 1
    ALGORITHM = "HS256"

    def __init__(
        self,
        secret_key: str,
        access_token_expire_hours: int = DEFAULT_ACCESS_EXPIRE_HOURS,
    ):
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._access_expire = timedelta(hours=access_token_expire_hours)

    def create_access_token(
        self,
        person_id: int,
        email: str,
        role: RoleName,
        expires_delta: Optional[timedelta] = None,
    ) -> str:
        now = datetime.now(tz=timezone.utc)
        payload = {
            "sub": str(person_id),
            "email": email,
            "role": role.value,
            "iat": now,
            "exp": now + (expires_delta or self._access_expire),
        }
        return jwt.encode(payload, self._secret_key, algorithm=self.ALGORITHM)

    def verify_token(self, token: str) -> TokenPayload:
        """Verify and decode a token.

        Raises
        ------
        InvalidTokenError
            If token is invalid, expired, or malformed
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
            )

            return TokenPayload(
                person_id=int(payload["sub"]),
                email=payload["email"],
                role=RoleName(payload["role"]),
                exp=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
            )

        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e
        except (KeyError, ValueError) as e:
            raise InvalidTokenError(f"Malformed token payload: {e}") from e
