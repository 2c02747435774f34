"""Dog Repository - SQL collaborator behind /api/dogs."""

from shelter_api.infrastructure.sql_repository import SqlResourceRepository
from shelter_api.models.dog import Dog
from shelter_api.schemas.dog import DogRecord


class SqlDogRepository(SqlResourceRepository):
    model = Dog
    record_schema = DogRecord
