from mindstore.domain.shared.value_objects.page_request import (
    PageRequest,
    SortDirection,
)

__all__ = ["PageRequest", "SortDirection"]
