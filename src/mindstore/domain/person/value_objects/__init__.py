from mindstore.domain.person.value_objects.role import (
    DEFAULT_ROLE_TABLE,
    Role,
    RoleName,
)

__all__ = ["DEFAULT_ROLE_TABLE", "Role", "RoleName"]
