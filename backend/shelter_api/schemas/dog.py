"""Dog Schemas - serialized form of a dog row."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class DogRecord(BaseModel):
    """Dog as returned by the API."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    breed: str | None = None
    adopter_id: int | None = None
    created_at: datetime
