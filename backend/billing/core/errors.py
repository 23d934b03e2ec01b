"""Error Hierarchy - typed, categorized exceptions for every billing failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Errors carry no HTTP status; api/error_handlers.py maps category to status
    - InvalidCredentialsError has one message for unknown email and wrong password
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with BillingError base: one FastAPI handler catches all
    - DependencyFailureError groups store and signing failures so callers can
      tell "our collaborator broke" from "the caller asked for something wrong"
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
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DEPENDENCY = "dependency"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: str | None = None
    resource_id: str | None = None
    debug_info: dict[str, Any] | None = None


class BillingError(Exception):
    """Base exception for all billing errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
            }
        }


# ─── Caller Errors ──────────────────────────────────────────────

class InvalidInputError(BillingError):
    """Malformed input reached the core (e.g. non-positive payment amount)."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context,
        )
        self.field = field


class AuthenticationError(BillingError):
    """Base for credential and token failures."""
    def __init__(self, message: str, code: str, context: ErrorContext | None = None):
        super().__init__(
            message, code, ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context,
        )


class InvalidCredentialsError(AuthenticationError):
    """Unknown email or wrong password - deliberately indistinguishable."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__("invalid email or password", "INVALID_CREDENTIALS", context)


class InvalidTokenError(AuthenticationError):
    """Token missing, malformed, or signed with another secret."""
    def __init__(self, reason: str = "invalid token", context: ErrorContext | None = None):
        super().__init__(reason, "INVALID_TOKEN", context)


class ExpiredTokenError(AuthenticationError):
    """Token signature is valid but its exp claim is in the past."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__("token has expired", "EXPIRED_TOKEN", context)


class ResourceNotFoundError(BillingError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context or ErrorContext(resource_id=resource_id),
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Wiring Errors ──────────────────────────────────────────────

class MissingContextError(BillingError):
    """A request-scoped value was read before anything set it."""
    def __init__(self, key: str, context: ErrorContext | None = None):
        super().__init__(
            f"{key} not found in request context",
            "MISSING_CONTEXT", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context or ErrorContext(debug_info={"key": key}),
        )
        self.key = key


# ─── Dependency Errors ──────────────────────────────────────────

class DependencyFailureError(BillingError):
    """A collaborator (store, signer) failed for reasons unrelated to the request."""
    def __init__(
        self, message: str, code: str = "DEPENDENCY_FAILURE",
        context: ErrorContext | None = None,
        category: ErrorCategory = ErrorCategory.DEPENDENCY,
        severity: ErrorSeverity = ErrorSeverity.CRITICAL,
    ):
        super().__init__(message, code, category, severity, context)


class ConflictError(DependencyFailureError):
    """Uniqueness or referential constraint rejected the write."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "CONFLICT", context,
            ErrorCategory.CONFLICT, ErrorSeverity.ERROR,
        )


class DatabaseError(DependencyFailureError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}", "DATABASE_ERROR",
            context or ErrorContext(debug_info={"operation": operation}),
        )
        self.operation = operation


class TokenIssuanceError(DependencyFailureError):
    """The token signer rejected the claims or the key."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"Token issuance failed: {message}", "TOKEN_ISSUANCE_ERROR", context,
        )
