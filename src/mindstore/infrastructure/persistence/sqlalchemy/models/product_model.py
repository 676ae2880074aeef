"""SQLAlchemy model for Product aggregate."""

from decimal import Decimal
from typing import Optional

from sqlalchemy import ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from mindstore.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from mindstore.infrastructure.persistence.sqlalchemy.models.category_model import (
    CategoryModel,
)
from mindstore.infrastructure.persistence.sqlalchemy.models.rating_model import (
    RatingModel,
)


class ProductModel(Base, TimestampMixin):
    """SQLAlchemy model for persisting Product aggregates.

    The unique ``rating_id`` keeps each rating owned by a single product.
    """

    __tablename__ = "products"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False, index=True)
    description: Mapped[str] = mapped_column(Text, default="", nullable=False)
    image: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    category_id: Mapped[int] = mapped_column(
        ForeignKey("categories.id"),
        nullable=False,
    )
    rating_id: Mapped[int] = mapped_column(
        ForeignKey("ratings.id"),
        unique=True,
        nullable=False,
    )

    category: Mapped[CategoryModel] = relationship(lazy="joined")
    rating: Mapped[RatingModel] = relationship(lazy="joined")

    def __repr__(self) -> str:
        return f"<ProductModel(id={self.id}, title={self.title})>"
