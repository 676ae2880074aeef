"""DTOs for users and admins."""

from dataclasses import dataclass
from typing import Optional

from mindstore.domain.person import Admin, Person, User


@dataclass(frozen=True)
class PersonDTO:
    """Outbound view of a person; never carries the password hash."""

    id: int
    name: str
    email: str
    role: str

    @classmethod
    def from_entity(cls, person: Person):
        if person.id is None:
            msg = "Cannot build a DTO for an unsaved person"
            raise ValueError(msg)
        return cls(
            id=person.id,
            name=person.name,
            email=person.email,
            role=person.role.name.value,
        )


@dataclass(frozen=True)
class UserDTO(PersonDTO):
    """Outbound view of a user."""

    @classmethod
    def from_user(cls, user: User) -> "UserDTO":
        return cls.from_entity(user)


@dataclass(frozen=True)
class AdminDTO(PersonDTO):
    """Outbound view of an admin."""

    @classmethod
    def from_admin(cls, admin: Admin) -> "AdminDTO":
        return cls.from_entity(admin)


@dataclass(frozen=True)
class PersonCreateDTO:
    """Inbound data for a new user or admin (password in plain text)."""

    name: str
    email: str
    password: str


@dataclass(frozen=True)
class PersonUpdateDTO:
    """Partial update for a user or admin.

    Each field is either ``None`` (leave unchanged) or the new value.
    The password is not applied here; the service hashes it first.
    """

    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None

    def apply_to(self, person: Person) -> None:
        if self.name is not None:
            person.rename(self.name)
        if self.email is not None:
            person.change_email(self.email)
