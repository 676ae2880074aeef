"""Value objects describing a sorted, paginated listing request."""

from dataclasses import dataclass
from enum import Enum


class SortDirection(str, Enum):
    """Accepted sort directions (the literal tokens clients send)."""

    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class PageRequest:
    """A one-based page of results ordered by a single field.

    Instances are only built from validated input, so repositories can
    trust ``sort_field`` to be one of their sortable columns.
    """

    page: int
    page_size: int
    sort_field: str
    direction: SortDirection = SortDirection.ASC

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size

    @property
    def is_descending(self) -> bool:
        return self.direction is SortDirection.DESC
