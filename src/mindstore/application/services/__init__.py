"""Application services."""

from mindstore.application.services.admin_service import AdminService
from mindstore.application.services.entity_resolver import EntityKind, EntityResolver
from mindstore.application.services.request_validator import (
    RequestValidator,
    UniquenessValidator,
)

__all__ = [
    "AdminService",
    "EntityKind",
    "EntityResolver",
    "RequestValidator",
    "UniquenessValidator",
]
