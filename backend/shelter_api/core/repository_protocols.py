"""Boundary Protocols - contracts between the resource routers and data access.

Invariants:
    - Routers depend only on these Protocols, never on a concrete repository
    - Every method is a coroutine; it returns a result or raises
    - Identifiers are passed through as received from the URL
    - Bodies are passed through as parsed; a non-mapping body is the
      collaborator's to reject

Design Decisions:
    - Protocol over ABC: fakes in tests satisfy the contract structurally
    - update() is a partial merge; remove() returns the deleted row count
"""

from typing import Mapping, Protocol

from shelter_api.core.domain_types import Record, ResourceId


class ResourceRepository(Protocol):
    """CRUD contract shared by every resource collaborator."""
    async def find(
        self, filters: Mapping[str, str | list[str]],
    ) -> list[Record]: ...
    async def find_by_id(self, resource_id: ResourceId) -> Record | None: ...
    async def add(self, payload: object) -> Record: ...
    async def remove(self, resource_id: ResourceId) -> int: ...
    async def update(
        self, resource_id: ResourceId, changes: object,
    ) -> Record | None: ...


class AdopterRepository(ResourceRepository, Protocol):
    """Contract for adopter persistence."""
    async def find_dogs(self, adopter_id: ResourceId) -> list[Record]: ...


class DogRepository(ResourceRepository, Protocol):
    """Contract for dog persistence."""
