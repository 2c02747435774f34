"""Domain Types - rich types that replace bare primitives across the codebase.

Invariants:
    - ResourceId wraps the raw path segment; the routing layer never parses it
    - All valid resources, operations and failure kinds encoded as Enums

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize into JSON log records without custom encoders
"""

from enum import Enum
from typing import Any, NewType


# ─── Identity Types ──────────────────────────────────────────────

ResourceId = NewType("ResourceId", str)

# Records cross the collaborator boundary as JSON-ready mappings
Record = dict[str, Any]


# ─── Enums ───────────────────────────────────────────────────────

class ResourceName(str, Enum):
    """Top-level API resources, one router each."""
    ADOPTERS = "adopters"
    DOGS = "dogs"


class ResourceOperation(str, Enum):
    """Collaborator operations invoked by the resource routers."""
    FIND = "find"
    FIND_BY_ID = "find_by_id"
    FIND_DOGS = "find_dogs"
    ADD = "add"
    REMOVE = "remove"
    UPDATE = "update"


class FailureKind(str, Enum):
    """Internal classification of a collaborator failure (logged, never returned)."""
    CONNECTIVITY = "connectivity"
    CONSTRAINT = "constraint"
    QUERY = "query"
    DRIVER = "driver"
    UNEXPECTED = "unexpected"
