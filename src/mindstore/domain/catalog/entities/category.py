from dataclasses import dataclass
from typing import Optional

from mindstore.domain.shared.exceptions import ValidationError


@dataclass(frozen=True)
class Category:
    """A product category; shared by many products."""

    name: str
    id: Optional[int] = None

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            msg = "Category name cannot be empty"
            raise ValidationError(msg, details={"field": "name"})
