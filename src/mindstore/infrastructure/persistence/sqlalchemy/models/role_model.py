"""SQLAlchemy model for the role reference table."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from mindstore.infrastructure.persistence.sqlalchemy.models.base import Base


class RoleModel(Base):
    """Fixed role rows, seeded from DEFAULT_ROLE_TABLE."""

    __tablename__ = "roles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    name: Mapped[str] = mapped_column(String(20), unique=True, nullable=False)

    def __repr__(self) -> str:
        return f"<RoleModel(id={self.id}, name={self.name})>"
