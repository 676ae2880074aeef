from mindstore.domain.person.repositories.person_repository import (
    AdminRepository,
    PersonRepository,
    UserRepository,
)
from mindstore.domain.person.repositories.role_repository import RoleRepository

__all__ = [
    "AdminRepository",
    "PersonRepository",
    "RoleRepository",
    "UserRepository",
]
