"""MetroLine ORM — a named transit route identified by a unique short code.

Invariants:
    - line_code is unique and is the public lookup key
    - Rows are created by external seeding, never by this service
"""

from sqlalchemy import String, Integer
from sqlalchemy.orm import Mapped, mapped_column

from metro_guide.db.base import Base


class MetroLine(Base):
    """Metro line reference data."""
    __tablename__ = "metro_lines"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    name_ar: Mapped[str] = mapped_column(String(100), nullable=False)
    color: Mapped[str] = mapped_column(String(7), nullable=False)  # hex
    line_code: Mapped[str] = mapped_column(
        String(20), unique=True, nullable=False, index=True,
    )

    def __repr__(self) -> str:
        return f"<MetroLine(code={self.line_code}, name={self.name})>"
