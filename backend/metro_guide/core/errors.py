"""Error Hierarchy — typed, categorized exceptions for all Metro Guide failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Input/lookup errors (400/404) are recoverable; store and unexpected errors (500) are critical
    - to_response() produces the REST envelope {"message": ...}
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with MetroGuideError base: one global handler catches all
    - EndpointFailureError carries the per-endpoint generic message so clients see
      "Failed to fetch stations" rather than a driver error string
"""

from enum import Enum


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
    DATABASE = "database"
    INTERNAL = "internal"


class MetroGuideError(Exception):
    """Base exception for all Metro Guide errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the REST error body."""
        return {"message": self.message}


# ─── Client Errors (400-level) ──────────────────────────────────

class InvalidInputError(MetroGuideError):
    """A required parameter or header is missing or malformed."""
    def __init__(self, message: str, field: str | None = None):
        super().__init__(
            message, "INVALID_INPUT", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.field = field


class ResourceNotFoundError(MetroGuideError):
    """Requested resource does not exist."""
    def __init__(self, message: str):
        super().__init__(
            message, "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, 404,
        )


# ─── Server Errors (500-level) ──────────────────────────────────

class EndpointFailureError(MetroGuideError):
    """An endpoint's unit of work failed for an unexpected reason."""
    def __init__(self, message: str):
        super().__init__(
            message, "ENDPOINT_FAILURE", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, 500,
        )


class DatabaseError(MetroGuideError):
    """Database operation failed outside an endpoint guard."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 500,
        )
        self.operation = operation
