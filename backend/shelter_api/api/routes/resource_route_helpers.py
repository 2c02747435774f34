"""Resource Route Helpers - run a collaborator call and normalize its outcome.

Invariants:
    - Any exception from a collaborator becomes CollaboratorFailureError (500)
      carrying the resource's fixed message and an internal FailureKind
    - Not-found outcomes become ResourceNotFoundError (404)
    - Nothing is logged here; the global ShelterError handler logs once per request

Design Decisions:
    - Raise and let main's exception handlers write the single response, as
      every other route in the API does
"""

from typing import Any, Awaitable, Callable, TypeVar

from shelter_api.core.classify_failure import classify_failure
from shelter_api.core.domain_types import ResourceOperation
from shelter_api.core.errors import CollaboratorFailureError, ResourceNotFoundError
from shelter_api.core.resource_messages import ResourceMessages

T = TypeVar("T")


async def call_repository(
    messages: ResourceMessages,
    operation: ResourceOperation,
    method: Callable[..., Awaitable[T]],
    *args: Any,
    resource_id: str | None = None,
) -> T:
    """Await a repository method; collapse any failure to the resource's 500."""
    try:
        return await method(*args)
    except Exception as e:
        raise CollaboratorFailureError(
            messages.failure_for(operation),
            messages.resource,
            operation,
            classify_failure(e),
            resource_id=resource_id,
            cause=e,
        ) from e


def not_found(
    messages: ResourceMessages,
    operation: ResourceOperation,
    resource_id: str,
) -> ResourceNotFoundError:
    return ResourceNotFoundError(
        messages.not_found_for(operation), messages.resource, operation,
        resource_id,
    )
