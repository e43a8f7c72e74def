"""Error Hierarchy — typed, categorized exceptions for all Users API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Request errors (400-level) are recoverable; server errors (500-level) are critical
    - to_response() produces the {"error": message} envelope; message is fixed per
      class so no internal detail reaches the client
    - code, category and severity go to the logs, never to the response body

Design Decisions:
    - Single hierarchy with UsersApiError base: FastAPI global handler catches all
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for log routing."""
    VALIDATION = "validation"
    DATABASE = "database"
    CONFIGURATION = "configuration"
    INTERNAL = "internal"


class UsersApiError(Exception):
    """Base exception for all Users API errors."""

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
        """Convert to the REST error envelope."""
        return {"error": self.message}


# ─── Request Errors (400-level) ─────────────────────────────────

class InvalidPayloadError(UsersApiError):
    """Request body could not be decoded into the expected shape."""
    def __init__(self):
        super().__init__(
            "Invalid request payload", "INVALID_PAYLOAD", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )


# ─── Server Errors (500-level) ──────────────────────────────────

class UserCreationError(UsersApiError):
    """Insert of a new user row failed."""
    def __init__(self):
        super().__init__(
            "Failed to create user", "USER_CREATE_FAILED", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 500,
        )


class InternalServerError(UsersApiError):
    """Generic server-side failure."""
    def __init__(self):
        super().__init__(
            "Internal Server Error", "INTERNAL_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, 500,
        )


class ConfigurationError(UsersApiError):
    """Startup configuration is missing or invalid."""
    def __init__(self, message: str):
        super().__init__(
            message, "CONFIGURATION_ERROR", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, 500,
        )
