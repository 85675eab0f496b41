"""Error Hierarchy: typed, categorized exceptions for every Pressroom failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (4xx) are reported to the caller as-is; infrastructure errors (5xx) are critical
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with PressroomError base: FastAPI global handler catches all (ADR: uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
    - The engine never retries and never converts one error kind into another
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories, one per error kind the engine reports."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    UNAUTHENTICATED = "unauthenticated"
    FORBIDDEN = "forbidden"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    article_id: str | None = None
    version_id: str | None = None
    user_message: str | None = None
    debug_info: dict[str, Any] | None = None


class PressroomError(Exception):
    """Base exception for all Pressroom errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.context.user_message or self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "article_id": self.context.article_id,
                    "version_id": self.context.version_id,
                },
            }
        }


# ─── Domain Errors (4xx) ────────────────────────────────────────

class ValidationFailedError(PressroomError):
    """A required field is missing or blank."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class ResourceNotFoundError(PressroomError):
    """Requested article, version, or like does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class DuplicateEngagementError(PressroomError):
    """The actor already holds this engagement fact (e.g. a second like)."""
    def __init__(self, engagement: str, context: ErrorContext | None = None):
        super().__init__(
            f"Already {engagement} by this user",
            "ALREADY_ENGAGED", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 409,
        )
        self.engagement = engagement


class AuthenticationRequiredError(PressroomError):
    """Action needs a user identity and the actor is anonymous."""
    def __init__(self, action: str, context: ErrorContext | None = None):
        super().__init__(
            f"Login required to {action}",
            "AUTHENTICATION_REQUIRED", ErrorCategory.UNAUTHENTICATED,
            ErrorSeverity.WARNING, context, 401,
        )
        self.action = action


class InvalidTokenError(PressroomError):
    """Bearer token could not be verified."""
    def __init__(self, reason: str = "invalid token", context: ErrorContext | None = None):
        super().__init__(
            f"Invalid token: {reason}",
            "INVALID_TOKEN", ErrorCategory.UNAUTHENTICATED,
            ErrorSeverity.WARNING, context, 401,
        )


class PermissionDeniedError(PressroomError):
    """Authenticated user lacks the admin flag."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Admin access required",
            "PERMISSION_DENIED", ErrorCategory.FORBIDDEN,
            ErrorSeverity.WARNING, context, 403,
        )


# ─── Infrastructure Errors (5xx) ────────────────────────────────

class DatabaseError(PressroomError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
