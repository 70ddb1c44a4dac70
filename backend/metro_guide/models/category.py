"""Category ORM — attraction classification (restaurants, museums, ...)."""

from sqlalchemy import String, Integer
from sqlalchemy.orm import Mapped, mapped_column

from metro_guide.db.base import Base


class Category(Base):
    """Category reference data."""
    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    name_ar: Mapped[str] = mapped_column(String(100), nullable=False)
    icon: Mapped[str] = mapped_column(String(50), nullable=False)
    color: Mapped[str] = mapped_column(String(7), nullable=False)

    def __repr__(self) -> str:
        return f"<Category(id={self.id}, name={self.name})>"
