"""Dog ORM - an animal in the shelter, optionally adopted.

Invariants:
    - id is an autoincrement integer primary key
    - name is non-nullable
    - adopter_id is NULL until the dog is adopted
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import String, Integer, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from shelter_api.db.base import Base


class Dog(Base):
    """Dog entity."""
    __tablename__ = "dogs"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(String(128), nullable=False)
    breed: Mapped[str | None] = mapped_column(String(128), nullable=True)
    adopter_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("adopters.id", ondelete="SET NULL"),
        nullable=True, index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    adopter: Mapped[Optional["Adopter"]] = relationship(
        "Adopter", back_populates="dogs",
    )
