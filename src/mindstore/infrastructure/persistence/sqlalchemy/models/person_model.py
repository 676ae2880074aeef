"""SQLAlchemy model for users and admins."""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from mindstore.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from mindstore.infrastructure.persistence.sqlalchemy.models.role_model import (
    RoleModel,
)


class PersonModel(Base, TimestampMixin):
    """One table for every person variant.

    ``kind`` tells users and admins apart; the unique index on ``email``
    makes addresses unique across both.
    """

    __tablename__ = "persons"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    kind: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(120), nullable=False)
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    role_id: Mapped[int] = mapped_column(ForeignKey("roles.id"), nullable=False)

    role: Mapped[RoleModel] = relationship(lazy="joined")

    def __repr__(self) -> str:
        return f"<PersonModel(id={self.id}, kind={self.kind}, email={self.email})>"
