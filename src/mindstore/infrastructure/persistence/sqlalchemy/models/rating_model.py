"""SQLAlchemy model for product ratings."""

from sqlalchemy import Float, Integer
from sqlalchemy.orm import Mapped, mapped_column

from mindstore.infrastructure.persistence.sqlalchemy.models.base import Base


class RatingModel(Base):
    __tablename__ = "ratings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    rate: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)
    count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    def __repr__(self) -> str:
        return f"<RatingModel(id={self.id}, rate={self.rate}, count={self.count})>"
