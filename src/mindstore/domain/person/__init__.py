"""Person domain: users, admins and their roles.

Email addresses are unique across every person variant. Roles are fixed
reference data resolved through DEFAULT_ROLE_TABLE, never taken from
client input.
"""

from mindstore.domain.person.aggregates import Admin, Person, User
from mindstore.domain.person.exceptions import (
    AdminNotFoundError,
    EmailAlreadyExistsError,
    RoleNotFoundError,
    UserNotFoundError,
)
from mindstore.domain.person.repositories import (
    AdminRepository,
    PersonRepository,
    RoleRepository,
    UserRepository,
)
from mindstore.domain.person.value_objects import (
    DEFAULT_ROLE_TABLE,
    Role,
    RoleName,
)

# Fields clients may sort user listings by (matched exactly).
USER_SORT_FIELDS = frozenset({"id", "name", "email"})

__all__ = [
    "DEFAULT_ROLE_TABLE",
    "USER_SORT_FIELDS",
    "Admin",
    "AdminNotFoundError",
    "AdminRepository",
    "EmailAlreadyExistsError",
    "Person",
    "PersonRepository",
    "Role",
    "RoleName",
    "RoleNotFoundError",
    "RoleRepository",
    "User",
    "UserNotFoundError",
    "UserRepository",
]
