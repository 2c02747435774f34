"""Repository Dependencies - FastAPI providers for the SQL-backed collaborators.

Invariants:
    - One repository instance per request, bound to the request's DB session
    - create_app() accepts replacements for these providers (test doubles)
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from shelter_api.core.repository_protocols import AdopterRepository, DogRepository
from shelter_api.infrastructure.adopter_repository import SqlAdopterRepository
from shelter_api.infrastructure.database import get_db
from shelter_api.infrastructure.dog_repository import SqlDogRepository


async def get_adopter_repository(
    db: AsyncSession = Depends(get_db),
) -> AdopterRepository:
    return SqlAdopterRepository(db)


async def get_dog_repository(
    db: AsyncSession = Depends(get_db),
) -> DogRepository:
    return SqlDogRepository(db)
