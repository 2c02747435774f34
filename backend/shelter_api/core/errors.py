"""Error Hierarchy - typed, categorized exceptions for all shelter API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - public_message is the only text ever sent to a client
    - to_response() produces the flat REST envelope {"message": ...}
    - The internal failure kind travels in ErrorContext, never in the response

Design Decisions:
    - Single hierarchy with ShelterError base: one FastAPI handler catches all
    - ErrorContext as dataclass: log fields without coupling to the logging setup
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone

from shelter_api.core.domain_types import FailureKind, ResourceName, ResourceOperation


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    COLLABORATOR = "collaborator"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Structured fields attached to the log record of an error."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource: ResourceName | None = None
    operation: ResourceOperation | None = None
    resource_id: str | None = None
    failure_kind: FailureKind | None = None

    def log_fields(self) -> dict:
        """Flatten to `extra=` fields for the JSON formatter."""
        return {
            "resource": self.resource.value if self.resource else None,
            "operation": self.operation.value if self.operation else None,
            "resource_id": self.resource_id,
            "failure_kind": (
                self.failure_kind.value if self.failure_kind else None
            ),
        }


class ShelterError(Exception):
    """Base exception for all shelter API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
        public_message: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status
        self.public_message = public_message or message

    def to_response(self) -> dict:
        """Convert to the REST error body."""
        return {"message": self.public_message}


# ─── Request Outcome Errors ─────────────────────────────────────

class ResourceNotFoundError(ShelterError):
    """Collaborator returned an empty, falsy or zero result."""
    def __init__(
        self,
        public_message: str,
        resource: ResourceName,
        operation: ResourceOperation,
        resource_id: str | None = None,
    ):
        super().__init__(
            f"{resource.value} '{resource_id}' not found ({operation.value})",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO,
            ErrorContext(
                resource=resource, operation=operation, resource_id=resource_id,
            ),
            404, public_message,
        )


class CollaboratorFailureError(ShelterError):
    """Data access call raised; the cause is kept for logs only."""
    def __init__(
        self,
        public_message: str,
        resource: ResourceName,
        operation: ResourceOperation,
        kind: FailureKind,
        resource_id: str | None = None,
        cause: BaseException | None = None,
    ):
        super().__init__(
            f"{resource.value}.{operation.value} failed ({kind.value}): {cause!r}",
            "COLLABORATOR_FAILURE", ErrorCategory.COLLABORATOR,
            ErrorSeverity.ERROR,
            ErrorContext(
                resource=resource, operation=operation,
                resource_id=resource_id, failure_kind=kind,
            ),
            500, public_message,
        )
        self.kind = kind
        self.cause = cause


# ─── Infrastructure Errors ──────────────────────────────────────

class DataAccessError(ShelterError):
    """Database operation failed inside a repository."""
    def __init__(self, message: str, operation: str, kind: FailureKind):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL,
            ErrorContext(failure_kind=kind), 503,
            "Database unavailable",
        )
        self.operation = operation
        self.kind = kind
