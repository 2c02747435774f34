"""Resource Messages - fixed public strings per (resource, operation)."""

import pytest

from shelter_api.core.domain_types import ResourceOperation
from shelter_api.core.resource_messages import ADOPTER_MESSAGES, DOG_MESSAGES


def test_adopter_failure_messages():
    assert ADOPTER_MESSAGES.failure_for(ResourceOperation.FIND) == "Error retrieving the adopters"
    assert ADOPTER_MESSAGES.failure_for(ResourceOperation.FIND_DOGS) == (
        "Error retrieving the dogs for this adopter"
    )
    assert ADOPTER_MESSAGES.failure_for(ResourceOperation.UPDATE) == "Error updating the adopter"


def test_adopter_not_found_messages():
    assert ADOPTER_MESSAGES.not_found_for(ResourceOperation.FIND_BY_ID) == "Adopter not found"
    assert ADOPTER_MESSAGES.not_found_for(ResourceOperation.FIND_DOGS) == "No dogs for this adopter"
    assert ADOPTER_MESSAGES.not_found_for(ResourceOperation.REMOVE) == "The adopter could not be found"
    assert ADOPTER_MESSAGES.not_found_for(ResourceOperation.UPDATE) == "The adopter could not be found"


def test_dog_messages_mirror_adopters():
    assert DOG_MESSAGES.failure_for(ResourceOperation.FIND) == "Error retrieving the dogs"
    assert DOG_MESSAGES.not_found_for(ResourceOperation.FIND_BY_ID) == "Dog not found"
    assert DOG_MESSAGES.removed == "The dog has been nuked"


def test_dogs_have_no_related_collection():
    with pytest.raises(KeyError):
        DOG_MESSAGES.failure_for(ResourceOperation.FIND_DOGS)
    with pytest.raises(KeyError):
        DOG_MESSAGES.not_found_for(ResourceOperation.FIND_DOGS)


def test_collection_find_has_no_not_found_message():
    with pytest.raises(KeyError):
        ADOPTER_MESSAGES.not_found_for(ResourceOperation.FIND)
