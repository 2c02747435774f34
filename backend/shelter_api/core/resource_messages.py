"""Resource Messages - the fixed strings each router answers with.

Invariants:
    - One failure message per (resource, operation); never derived from the error
    - Adopters and dogs share the same shape; only dogs lack find_dogs

Design Decisions:
    - Frozen dataclass per resource instead of string formatting: messages are
      part of the public contract and are asserted verbatim by clients
"""

from dataclasses import dataclass

from shelter_api.core.domain_types import ResourceName, ResourceOperation


@dataclass(frozen=True)
class ResourceMessages:
    """Public messages for one resource router."""
    resource: ResourceName
    retrieve_all_failed: str
    retrieve_one_failed: str
    not_found: str
    add_failed: str
    removed: str
    missing: str
    remove_failed: str
    update_failed: str
    no_related: str | None = None
    retrieve_related_failed: str | None = None

    def failure_for(self, operation: ResourceOperation) -> str:
        """Return the 500 message for a failed collaborator call."""
        messages = {
            ResourceOperation.FIND: self.retrieve_all_failed,
            ResourceOperation.FIND_BY_ID: self.retrieve_one_failed,
            ResourceOperation.FIND_DOGS: self.retrieve_related_failed,
            ResourceOperation.ADD: self.add_failed,
            ResourceOperation.REMOVE: self.remove_failed,
            ResourceOperation.UPDATE: self.update_failed,
        }
        message = messages[operation]
        if message is None:
            raise KeyError(
                f"{self.resource.value} has no message for {operation.value}",
            )
        return message

    def not_found_for(self, operation: ResourceOperation) -> str:
        """Return the 404 message for an empty collaborator result."""
        if operation == ResourceOperation.FIND_BY_ID:
            return self.not_found
        if operation == ResourceOperation.FIND_DOGS and self.no_related:
            return self.no_related
        if operation in (ResourceOperation.REMOVE, ResourceOperation.UPDATE):
            return self.missing
        raise KeyError(
            f"{self.resource.value} has no not-found message for {operation.value}",
        )


ADOPTER_MESSAGES = ResourceMessages(
    resource=ResourceName.ADOPTERS,
    retrieve_all_failed="Error retrieving the adopters",
    retrieve_one_failed="Error retrieving the adopter",
    not_found="Adopter not found",
    add_failed="Error adding the adopter",
    removed="The adopter has been nuked",
    missing="The adopter could not be found",
    remove_failed="Error removing the adopter",
    update_failed="Error updating the adopter",
    no_related="No dogs for this adopter",
    retrieve_related_failed="Error retrieving the dogs for this adopter",
)

DOG_MESSAGES = ResourceMessages(
    resource=ResourceName.DOGS,
    retrieve_all_failed="Error retrieving the dogs",
    retrieve_one_failed="Error retrieving the dog",
    not_found="Dog not found",
    add_failed="Error adding the dog",
    removed="The dog has been nuked",
    missing="The dog could not be found",
    remove_failed="Error removing the dog",
    update_failed="Error updating the dog",
)
