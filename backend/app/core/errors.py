"""Error Hierarchy — typed, categorized exceptions for every feed failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) are recoverable; internal errors (500-level) are critical
    - to_response() produces the REST envelope {"error": <message>, "code": <code>}
    - Internal errors never carry storage/driver detail in their public message

Design Decisions:
    - Single hierarchy with FeedError base: FastAPI global handler catches all (ADR: uniform error shape)
    - AuthError subclasses keep the 401 family distinguishable in logs and tests
      while sharing one HTTP status
"""

from dataclasses import dataclass
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
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass(frozen=True)
class ErrorContext:
    """Which post and caller an error concerns; surfaced as log fields."""
    post_id: str | None = None
    user_id: str | None = None

    def log_fields(self) -> dict:
        return {
            key: value
            for key, value in (("post_id", self.post_id), ("user_id", self.user_id))
            if value is not None
        }


class FeedError(Exception):
    """Base exception for all feed errors."""

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
        return {"error": self.message, "code": self.code}


# ─── Client Errors (400-level) ──────────────────────────────────

class InputValidationError(FeedError):
    """Malformed or empty input rejected before any mutation."""
    def __init__(self, message: str, fields: list[str], context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.fields = fields


class EmailTakenError(InputValidationError):
    """Registration attempted with an email that already has an account."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__("email already registered", ["email"], context)
        self.code = "EMAIL_TAKEN"


class InvalidLoginError(InputValidationError):
    """Unknown email or wrong password. Deliberately indistinguishable."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__("invalid credentials", ["email", "password"], context)
        self.code = "INVALID_LOGIN"


class AuthError(FeedError):
    """Missing, malformed or invalid bearer credential."""
    def __init__(self, message: str, code: str, context: ErrorContext | None = None):
        super().__init__(
            message, code, ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class MissingCredentialError(AuthError):
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "missing authorization header", "MISSING_CREDENTIAL", context,
        )


class MalformedCredentialError(AuthError):
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "invalid authorization header", "MALFORMED_CREDENTIAL", context,
        )


class InvalidCredentialError(AuthError):
    def __init__(self, reason: str = "invalid token", context: ErrorContext | None = None):
        super().__init__(reason, "INVALID_CREDENTIAL", context)


class ForbiddenError(FeedError):
    """Authenticated caller does not own the target resource."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"not allowed to modify {resource_type.lower()} '{resource_id}'",
            "FORBIDDEN", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, context, 403,
        )


class ResourceNotFoundError(FeedError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, context, 404,
        )


# ─── Internal Errors (500-level) ────────────────────────────────

class InternalError(FeedError):
    """Unexpected failure. Public message is always generic."""
    def __init__(
        self,
        detail: str = "unexpected failure",
        code: str = "INTERNAL_ERROR",
        category: ErrorCategory = ErrorCategory.INTERNAL,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            "Internal server error", code, category,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.detail = detail


class DatabaseError(InternalError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE, context,
        )
        self.operation = operation
