"""Dogs Router - CRUD over /api/dogs, same contract as the adopters router."""

from fastapi import APIRouter

from shelter_api.api.routes.resource_routes import (
    RepositoryProvider, register_crud_routes,
)
from shelter_api.core.resource_messages import DOG_MESSAGES


def build_dogs_router(get_repository: RepositoryProvider) -> APIRouter:
    router = APIRouter(prefix="/api/dogs", tags=["dogs"])
    register_crud_routes(router, DOG_MESSAGES, get_repository)
    return router
