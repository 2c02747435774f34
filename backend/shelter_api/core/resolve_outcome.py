"""Outcome Rules - decide 200 vs 404 from a settled collaborator result.

Invariants:
    - A falsy entity (None, empty mapping) is "not found"
    - A related collection is found only when it holds at least one item
    - A removal succeeded only when the count is strictly greater than 0
"""

from typing import Any


def entity_found(entity: Any) -> bool:
    return bool(entity)


def collection_found(items: Any) -> bool:
    return bool(items) and len(items) > 0


def removal_succeeded(count: Any) -> bool:
    """True only for a numeric count > 0; None, 0 and non-numbers are misses."""
    if isinstance(count, bool) or not isinstance(count, (int, float)):
        return False
    return count > 0
