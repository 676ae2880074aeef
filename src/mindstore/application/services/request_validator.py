"""Input validation that runs before any repository write or listing query.

Two collaborators live here:

- RequestValidator checks listing parameters (pagination bounds, sort
  direction, sort field allow-lists, price ranges). It is pure and never
  touches a repository.
- UniquenessValidator checks that an email or a product title is not
  taken yet. The unique indexes in the database remain the final guard;
  this check exists to fail early with a clear message.
"""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal
from typing import TYPE_CHECKING, Optional, Union

from mindstore.domain.catalog import ProductAlreadyExistsError, ProductRepository
from mindstore.domain.person import EmailAlreadyExistsError, PersonRepository
from mindstore.domain.shared.exceptions import (
    InvalidParameterError,
    NotAllowedValueError,
)
from mindstore.domain.shared.value_objects import PageRequest, SortDirection

if TYPE_CHECKING:
    from mindstore_config.settings import Settings

Number = Union[int, float, Decimal]


class RequestValidator:
    """Validate pagination, sorting and price-range parameters."""

    DEFAULT_MIN_PAGE_SIZE = 1
    DEFAULT_MAX_PAGE_SIZE = 100
    DEFAULT_MAX_PRICE = 1000
    # Largest OFFSET SQLite and PostgreSQL accept (signed 64-bit)
    MAX_OFFSET = 2**63 - 1

    def __init__(
        self,
        min_page_size: int = DEFAULT_MIN_PAGE_SIZE,
        max_page_size: int = DEFAULT_MAX_PAGE_SIZE,
        max_price: Number = DEFAULT_MAX_PRICE,
    ):
        self._min_page_size = min_page_size
        self._max_page_size = max_page_size
        self._max_price = max_price

    @classmethod
    def from_settings(cls, settings: Settings) -> RequestValidator:
        return cls(
            min_page_size=settings.pagination_min_page_size,
            max_page_size=settings.pagination_max_page_size,
            max_price=settings.product_max_price,
        )

    def validate_pages(self, page: int, page_size: int) -> None:
        if page < 1:
            msg = "Page must be 1 or greater"
            raise InvalidParameterError(msg, details={"page": page})
        if not self._min_page_size <= page_size <= self._max_page_size:
            msg = (
                f"Page size must be between {self._min_page_size} "
                f"and {self._max_page_size}"
            )
            raise InvalidParameterError(msg, details={"page_size": page_size})
        if (page - 1) * page_size > self.MAX_OFFSET:
            msg = "Page is out of range"
            raise InvalidParameterError(
                msg,
                details={"page": page, "page_size": page_size},
            )

    def parse_direction(self, direction: str) -> SortDirection:
        """Accept exactly ``"asc"`` or ``"desc"``."""
        for candidate in SortDirection:
            if direction == candidate.value:
                return candidate
        msg = "Direction not allowed"
        raise NotAllowedValueError(msg, details={"direction": direction})

    def validate_sort_field(
        self,
        field: str,
        allowed: Iterable[str],
        case_insensitive: bool = False,
    ) -> str:
        """Return the canonical field name from ``allowed``."""
        allowed = tuple(allowed)
        for candidate in allowed:
            if field == candidate:
                return candidate
            if case_insensitive and field.lower() == candidate.lower():
                return candidate
        msg = f"Field not found: {field}"
        raise InvalidParameterError(
            msg,
            details={"field": field, "allowed": sorted(allowed)},
        )

    def validate_price_range(self, min_price: Number, max_price: Number) -> None:
        if min_price < 0 or max_price > self._max_price:
            msg = f"Price must be between 0 and {self._max_price}"
            raise NotAllowedValueError(
                msg,
                details={"min_price": str(min_price), "max_price": str(max_price)},
            )
        if min_price > max_price:
            msg = "Minimum price cannot exceed maximum price"
            raise NotAllowedValueError(
                msg,
                details={"min_price": str(min_price), "max_price": str(max_price)},
            )

    def page_request(
        self,
        direction: str,
        field: str,
        page: int,
        page_size: int,
        allowed_fields: Iterable[str],
        case_insensitive: bool = False,
    ) -> PageRequest:
        """Validate every listing parameter and build the page request.

        Checks run in the order pages, direction, field.
        """
        self.validate_pages(page, page_size)
        sort_direction = self.parse_direction(direction)
        sort_field = self.validate_sort_field(
            field,
            allowed_fields,
            case_insensitive=case_insensitive,
        )
        return PageRequest(
            page=page,
            page_size=page_size,
            sort_field=sort_field,
            direction=sort_direction,
        )


class UniquenessValidator:
    """Reject emails and product titles that are already taken."""

    def __init__(
        self,
        person_repository: PersonRepository,
        product_repository: ProductRepository,
    ):
        self._person_repo = person_repository
        self._product_repo = product_repository

    async def ensure_email_available(
        self,
        email: str,
        exclude_id: Optional[int] = None,
    ) -> None:
        """Fail if any user or admin other than ``exclude_id`` owns ``email``."""
        existing = await self._person_repo.find_by_email(email)
        if existing is None:
            return
        if exclude_id is not None and existing.id == exclude_id:
            return
        raise EmailAlreadyExistsError(email)

    async def ensure_title_available(
        self,
        title: str,
        exclude_id: Optional[int] = None,
    ) -> None:
        """Fail if a product other than ``exclude_id`` has ``title``."""
        existing = await self._product_repo.find_by_title(title)
        if existing is None:
            return
        if exclude_id is not None and existing.id == exclude_id:
            return
        raise ProductAlreadyExistsError(title)
