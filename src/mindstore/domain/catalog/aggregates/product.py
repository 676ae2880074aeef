"""Product aggregate."""

from decimal import Decimal
from typing import Optional, Union

from mindstore.domain.catalog.entities import Category, Rating
from mindstore.domain.shared.exceptions import ValidationError


def _to_price(value: Union[Decimal, int, float, str]) -> Decimal:
    price = value if isinstance(value, Decimal) else Decimal(str(value))
    if price < 0:
        msg = "Price cannot be negative"
        raise ValidationError(msg, details={"price": str(price)})
    return price


def _to_title(value: str) -> str:
    title = (value or "").strip()
    if not title:
        msg = "Title cannot be empty"
        raise ValidationError(msg, details={"field": "title"})
    return title


class Product:
    """
    Product aggregate root.

    Every persisted product references one shared Category and owns one
    Rating. Titles are unique across the catalog.
    """

    def __init__(
        self,
        title: str,
        price: Union[Decimal, int, float, str],
        category: Category,
        rating: Rating,
        description: str = "",
        image: Optional[str] = None,
        id: Optional[int] = None,
    ):
        self._id = id
        self._title = _to_title(title)
        self._price = _to_price(price)
        self._category = category
        self._rating = rating
        self._description = description or ""
        self._image = image

    @property
    def id(self) -> Optional[int]:
        return self._id

    @property
    def title(self) -> str:
        return self._title

    @property
    def price(self) -> Decimal:
        return self._price

    @property
    def category(self) -> Category:
        return self._category

    @property
    def rating(self) -> Rating:
        return self._rating

    @property
    def description(self) -> str:
        return self._description

    @property
    def image(self) -> Optional[str]:
        return self._image

    def retitle(self, title: str) -> None:
        self._title = _to_title(title)

    def reprice(self, price: Union[Decimal, int, float, str]) -> None:
        self._price = _to_price(price)

    def describe(self, description: str) -> None:
        self._description = description

    def change_image(self, image: str) -> None:
        self._image = image

    def move_to(self, category: Category) -> None:
        self._category = category

    def attach_rating(self, rating: Rating) -> None:
        self._rating = rating

    def is_priced_between(self, min_price: Decimal, max_price: Decimal) -> bool:
        return min_price <= self._price <= max_price

    @classmethod
    def create(
        cls,
        title: str,
        price: Union[Decimal, int, float, str],
        category: Category,
        description: str = "",
        image: Optional[str] = None,
    ) -> "Product":
        return cls(
            title=title,
            price=price,
            category=category,
            rating=Rating.empty(),
            description=description,
            image=image,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Product):
            return NotImplemented
        if self._id is None or other._id is None:
            return self is other
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id) if self._id is not None else id(self)

    def __repr__(self) -> str:
        return f"Product(id={self._id}, title={self._title!r})"
