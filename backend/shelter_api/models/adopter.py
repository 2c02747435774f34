"""Adopter ORM - a person who adopts dogs from the shelter.

Invariants:
    - id is an autoincrement integer primary key
    - name is non-nullable
    - Deleting an adopter never deletes its dogs (dogs.adopter_id is cleared)

Design Decisions:
    - passive_deletes on the relationship: the repository clears adopter_id
      explicitly before deleting, the database FK is ON DELETE SET NULL
"""

from datetime import datetime, timezone

from sqlalchemy import String, Integer, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship

from shelter_api.db.base import Base


class Adopter(Base):
    """Adopter entity."""
    __tablename__ = "adopters"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(String(128), nullable=False)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    dogs: Mapped[list["Dog"]] = relationship(
        "Dog", back_populates="adopter", passive_deletes=True,
    )
