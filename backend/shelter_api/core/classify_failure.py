"""Failure Classification - maps any collaborator exception to a FailureKind.

Invariants:
    - Pure function, no IO, never raises
    - DataAccessError keeps the kind assigned where the database error was caught
"""

from shelter_api.core.domain_types import FailureKind
from shelter_api.core.errors import DataAccessError


def classify_failure(exc: BaseException) -> FailureKind:
    """Return the internal failure kind for an exception raised by a collaborator."""
    if isinstance(exc, DataAccessError):
        return exc.kind
    # ConnectionError and TimeoutError are OSError subclasses
    if isinstance(exc, OSError):
        return FailureKind.CONNECTIVITY
    if isinstance(exc, (LookupError, ValueError, TypeError)):
        return FailureKind.QUERY
    return FailureKind.UNEXPECTED
