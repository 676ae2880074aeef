"""DTOs for products, categories and ratings."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from mindstore.domain.catalog import Category, Product, Rating


@dataclass(frozen=True)
class RatingDTO:
    id: int
    rate: float
    count: int

    @classmethod
    def from_entity(cls, rating: Rating) -> "RatingDTO":
        if rating.id is None:
            msg = "Cannot build a DTO for an unsaved rating"
            raise ValueError(msg)
        return cls(id=rating.id, rate=rating.rate, count=rating.count)


@dataclass(frozen=True)
class CategoryDTO:
    id: int
    name: str

    @classmethod
    def from_entity(cls, category: Category) -> "CategoryDTO":
        if category.id is None:
            msg = "Cannot build a DTO for an unsaved category"
            raise ValueError(msg)
        return cls(id=category.id, name=category.name)


@dataclass(frozen=True)
class ProductDTO:
    """Outbound view of a product; the category is flattened to its name."""

    id: int
    title: str
    price: Decimal
    description: str
    image: Optional[str]
    category: str
    rating: RatingDTO

    @classmethod
    def from_entity(cls, product: Product) -> "ProductDTO":
        if product.id is None:
            msg = "Cannot build a DTO for an unsaved product"
            raise ValueError(msg)
        return cls(
            id=product.id,
            title=product.title,
            price=product.price,
            description=product.description,
            image=product.image,
            category=product.category.name,
            rating=RatingDTO.from_entity(product.rating),
        )


@dataclass(frozen=True)
class ProductCreateDTO:
    """Inbound data for a new product; ``category`` is a category name."""

    title: str
    price: Decimal
    category: str
    description: str = ""
    image: Optional[str] = None


@dataclass(frozen=True)
class ProductUpdateDTO:
    """Partial update for a product.

    Each field is either ``None`` (leave unchanged) or the new value.
    A new ``category`` name is resolved by the service, not applied here.
    """

    title: Optional[str] = None
    price: Optional[Decimal] = None
    description: Optional[str] = None
    image: Optional[str] = None
    category: Optional[str] = None

    def apply_to(self, product: Product) -> None:
        if self.title is not None:
            product.retitle(self.title)
        if self.price is not None:
            product.reprice(self.price)
        if self.description is not None:
            product.describe(self.description)
        if self.image is not None:
            product.change_image(self.image)
