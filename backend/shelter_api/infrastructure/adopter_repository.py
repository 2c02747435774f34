"""Adopter Repository - SQL collaborator behind /api/adopters.

Invariants:
    - find_dogs returns [] (never raises) for unknown or non-integer adopter ids
    - remove() detaches the adopter's dogs before deleting; dogs are never deleted
"""

from sqlalchemy import select, update

from shelter_api.core.domain_types import Record, ResourceId
from shelter_api.infrastructure.database import translate_db_errors
from shelter_api.infrastructure.sql_repository import (
    SqlResourceRepository, parse_primary_key,
)
from shelter_api.models.adopter import Adopter
from shelter_api.models.dog import Dog
from shelter_api.schemas.adopter import AdopterRecord
from shelter_api.schemas.dog import DogRecord


class SqlAdopterRepository(SqlResourceRepository):
    model = Adopter
    record_schema = AdopterRecord

    async def find_dogs(self, adopter_id: ResourceId) -> list[Record]:
        pk = parse_primary_key(adopter_id)
        if pk is None:
            return []
        async with translate_db_errors(self._db, "find_dogs"):
            result = await self._db.execute(
                select(Dog).where(Dog.adopter_id == pk).order_by(Dog.id),
            )
            return [
                DogRecord.model_validate(dog).model_dump(mode="json")
                for dog in result.scalars().all()
            ]

    async def _before_remove(self, pk: int) -> None:
        # Same transaction as the delete; committed together
        await self._db.execute(
            update(Dog).where(Dog.adopter_id == pk).values(adopter_id=None),
        )
