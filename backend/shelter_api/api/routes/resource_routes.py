"""Resource Routes - the five CRUD handlers shared by every resource router.

Invariants:
    - GET ""        -> 200 + whatever find(query params) returns
    - GET "/{id}"   -> 200 + entity | 404 when the result is falsy
    - POST ""       -> 201 + created entity (never 200)
    - DELETE "/{id}"-> 200 + confirmation only when the removed count > 0, else 404
    - PUT "/{id}"   -> 200 + updated entity | 404 when the result is falsy
    - Request bodies reach the repository unvalidated: any parsed JSON value
      passes through, a missing or non-JSON body arrives as {}
    - Repeated query keys reach find() as a list of their values

Design Decisions:
    - Routes registered onto a router built by the resource module, so each
      resource keeps its own prefix, tags and extra routes
"""

from typing import Any, Callable

from fastapi import APIRouter, Body, Depends, Request, status

from shelter_api.api.routes.resource_route_helpers import call_repository, not_found
from shelter_api.core.domain_types import ResourceId, ResourceOperation
from shelter_api.core.repository_protocols import ResourceRepository
from shelter_api.core.resolve_outcome import entity_found, removal_succeeded
from shelter_api.core.resource_messages import ResourceMessages
from shelter_api.schemas.message import MessageResponse

RepositoryProvider = Callable[..., Any]


def query_filters(request: Request) -> dict[str, str | list[str]]:
    """Query string as a filter mapping; repeated keys keep every value."""
    filters: dict[str, str | list[str]] = {}
    for key, value in request.query_params.multi_items():
        if key not in filters:
            filters[key] = value
        elif isinstance(filters[key], list):
            filters[key].append(value)
        else:
            filters[key] = [filters[key], value]
    return filters


def request_body(payload: Any) -> Any:
    # FastAPI hands over raw bytes for non-JSON content types
    if payload is None or isinstance(payload, (bytes, bytearray)):
        return {}
    return payload


def register_crud_routes(
    router: APIRouter,
    messages: ResourceMessages,
    get_repository: RepositoryProvider,
) -> None:
    """Attach list/get/create/delete/update handlers for one resource."""
    name = messages.resource.value

    @router.get("", name=f"list_{name}")
    async def list_resources(
        request: Request,
        repository: ResourceRepository = Depends(get_repository),
    ):
        return await call_repository(
            messages, ResourceOperation.FIND,
            repository.find, query_filters(request),
        )

    @router.get("/{resource_id}", name=f"get_{name}")
    async def get_resource(
        resource_id: str,
        repository: ResourceRepository = Depends(get_repository),
    ):
        entity = await call_repository(
            messages, ResourceOperation.FIND_BY_ID,
            repository.find_by_id, ResourceId(resource_id),
            resource_id=resource_id,
        )
        if not entity_found(entity):
            raise not_found(messages, ResourceOperation.FIND_BY_ID, resource_id)
        return entity

    @router.post(
        "", name=f"create_{name}", status_code=status.HTTP_201_CREATED,
    )
    async def create_resource(
        payload: Any = Body(None),
        repository: ResourceRepository = Depends(get_repository),
    ):
        return await call_repository(
            messages, ResourceOperation.ADD, repository.add, request_body(payload),
        )

    @router.delete(
        "/{resource_id}", name=f"delete_{name}", response_model=MessageResponse,
    )
    async def delete_resource(
        resource_id: str,
        repository: ResourceRepository = Depends(get_repository),
    ):
        count = await call_repository(
            messages, ResourceOperation.REMOVE,
            repository.remove, ResourceId(resource_id),
            resource_id=resource_id,
        )
        if not removal_succeeded(count):
            raise not_found(messages, ResourceOperation.REMOVE, resource_id)
        return MessageResponse(message=messages.removed)

    @router.put("/{resource_id}", name=f"update_{name}")
    async def update_resource(
        resource_id: str,
        changes: Any = Body(None),
        repository: ResourceRepository = Depends(get_repository),
    ):
        entity = await call_repository(
            messages, ResourceOperation.UPDATE,
            repository.update, ResourceId(resource_id), request_body(changes),
            resource_id=resource_id,
        )
        if not entity_found(entity):
            raise not_found(messages, ResourceOperation.UPDATE, resource_id)
        return entity
