"""SQLAlchemy model for categories."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from mindstore.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class CategoryModel(Base, TimestampMixin):
    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(
        String(120),
        unique=True,
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<CategoryModel(id={self.id}, name={self.name})>"
