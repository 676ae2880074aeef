"""Person aggregates: the shared base plus the User and Admin variants."""

from typing import ClassVar, Optional

from mindstore.domain.person.value_objects import Role
from mindstore.domain.shared.exceptions import ValidationError


def _require_text(value: str, field: str) -> str:
    value = (value or "").strip()
    if not value:
        msg = f"{field} cannot be empty"
        raise ValidationError(msg, details={"field": field})
    return value


class Person:
    """
    Base aggregate for anyone holding an account.

    ``id`` stays ``None`` until the repository persists the person. The
    password is only ever held as a hash.
    """

    KIND: ClassVar[str] = "person"

    def __init__(
        self,
        name: str,
        email: str,
        password_hash: str,
        role: Role,
        id: Optional[int] = None,
    ):
        self._id = id
        self._name = _require_text(name, "name")
        self._email = _require_text(email, "email")
        self._password_hash = password_hash
        self._role = role

    @property
    def id(self) -> Optional[int]:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> str:
        return self._email

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def role(self) -> Role:
        return self._role

    @property
    def kind(self) -> str:
        return self.KIND

    def rename(self, name: str) -> None:
        self._name = _require_text(name, "name")

    def change_email(self, email: str) -> None:
        self._email = _require_text(email, "email")

    def change_password_hash(self, password_hash: str) -> None:
        self._password_hash = password_hash

    @classmethod
    def create(
        cls,
        name: str,
        email: str,
        password_hash: str,
        role: Role,
    ):
        return cls(name=name, email=email, password_hash=password_hash, role=role)

    @classmethod
    def reconstitute(
        cls,
        id: int,
        name: str,
        email: str,
        password_hash: str,
        role: Role,
    ):
        return cls(
            id=id,
            name=name,
            email=email,
            password_hash=password_hash,
            role=role,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Person):
            return NotImplemented
        if self._id is None or other._id is None:
            return self is other
        return self.KIND == other.KIND and self._id == other._id

    def __hash__(self) -> int:
        return hash((self.KIND, self._id)) if self._id is not None else id(self)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self._id}, email={self._email})"


class User(Person):
    """A shop customer."""

    KIND = "user"


class Admin(Person):
    """A back-office administrator; may only edit its own record."""

    KIND = "admin"
