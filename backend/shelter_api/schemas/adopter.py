"""Adopter Schemas - serialized form of an adopter row."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class AdopterRecord(BaseModel):
    """Adopter as returned by the API."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str | None = None
    created_at: datetime
