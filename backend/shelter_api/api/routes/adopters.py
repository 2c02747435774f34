"""Adopters Router - CRUD over /api/adopters plus the adopter's dogs.

Invariants:
    - GET /{id}/dogs -> 200 + list only when the list is non-empty, else 404
    - The repository is injected through the provider given to the builder
"""

from fastapi import APIRouter, Depends

from shelter_api.api.routes.resource_route_helpers import call_repository, not_found
from shelter_api.api.routes.resource_routes import (
    RepositoryProvider, register_crud_routes,
)
from shelter_api.core.domain_types import ResourceId, ResourceOperation
from shelter_api.core.repository_protocols import AdopterRepository
from shelter_api.core.resolve_outcome import collection_found
from shelter_api.core.resource_messages import ADOPTER_MESSAGES


def build_adopters_router(get_repository: RepositoryProvider) -> APIRouter:
    router = APIRouter(prefix="/api/adopters", tags=["adopters"])
    register_crud_routes(router, ADOPTER_MESSAGES, get_repository)

    @router.get("/{adopter_id}/dogs", name="list_adopter_dogs")
    async def list_adopter_dogs(
        adopter_id: str,
        repository: AdopterRepository = Depends(get_repository),
    ):
        dogs = await call_repository(
            ADOPTER_MESSAGES, ResourceOperation.FIND_DOGS,
            repository.find_dogs, ResourceId(adopter_id),
            resource_id=adopter_id,
        )
        if not collection_found(dogs):
            raise not_found(ADOPTER_MESSAGES, ResourceOperation.FIND_DOGS, adopter_id)
        return dogs

    return router
