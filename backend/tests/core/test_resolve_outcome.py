"""Outcome Rules - presence, emptiness and removal count."""

from shelter_api.core.resolve_outcome import (
    collection_found, entity_found, removal_succeeded,
)


def test_entity_found():
    assert entity_found({"id": 1})
    assert not entity_found(None)
    assert not entity_found({})


def test_collection_found_requires_items():
    assert collection_found([{"id": 1}])
    assert not collection_found([])
    assert not collection_found(None)


def test_removal_requires_positive_count():
    assert removal_succeeded(1)
    assert removal_succeeded(3)
    assert not removal_succeeded(0)
    assert not removal_succeeded(-1)
    assert not removal_succeeded(None)
    assert not removal_succeeded("1")


def test_boolean_is_not_a_count():
    assert not removal_succeeded(True)
    assert not removal_succeeded(False)
