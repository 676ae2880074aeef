"""Aggregate rating owned by exactly one product."""

from dataclasses import dataclass
from typing import Optional

from mindstore.domain.shared.exceptions import ValidationError

MIN_RATE = 0.0
MAX_RATE = 5.0


@dataclass(frozen=True)
class Rating:
    """Average rate over ``count`` contributions.

    Created empty alongside its product and deleted with it.
    """

    rate: float = 0.0
    count: int = 0
    id: Optional[int] = None

    def __post_init__(self) -> None:
        if not MIN_RATE <= self.rate <= MAX_RATE:
            msg = f"Rate must be between {MIN_RATE:g} and {MAX_RATE:g}"
            raise ValidationError(msg, details={"rate": self.rate})
        if self.count < 0:
            msg = "Rating count cannot be negative"
            raise ValidationError(msg, details={"count": self.count})

    @classmethod
    def empty(cls) -> "Rating":
        return cls(rate=0.0, count=0)

    @property
    def is_empty(self) -> bool:
        return self.count == 0
