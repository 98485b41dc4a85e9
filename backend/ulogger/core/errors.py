"""Error Hierarchy — typed, categorized exceptions for all μlogger failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Input errors (400-level) are the caller's to fix; infrastructure errors
      (500-level) are surfaced as-is, never retried
    - to_response() produces the REST envelope used by the global handlers
    - Core helpers raise synchronously; the resource loader raises from awaits

Design Decisions:
    - Single hierarchy with ULoggerError base: FastAPI global handler catches all
    - ErrorContext as dataclass: observability fields without coupling to logging
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
    FORMAT = "format"
    RANGE = "range"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    EXTERNAL_RESOURCE = "external_resource"
    TIMEOUT = "timeout"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and responses."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    field_name: str | None = None
    resource_id: str | None = None
    track_id: int | None = None
    debug_info: dict[str, Any] | None = None


class ULoggerError(Exception):
    """Base exception for all μlogger errors."""

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
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "field": self.context.field_name,
                    "resource_id": self.context.resource_id,
                    "track_id": self.context.track_id,
                },
            }
        }


# ─── Input Errors (400-level) ───────────────────────────────────

class InvalidInputError(ULoggerError):
    """Coercion of an external value failed (missing, null, or not a number)."""
    def __init__(
        self, message: str = "Invalid value", field: str | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        if field is not None:
            ctx.field_name = field
        super().__init__(
            message, "INVALID_INPUT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.field = field


class ColorRangeError(ULoggerError):
    """Scale color endpoint or intensity outside its allowed range."""
    def __init__(self, message: str = "Invalid value", context: ErrorContext | None = None):
        super().__init__(
            message, "COLOR_OUT_OF_RANGE", ErrorCategory.RANGE,
            ErrorSeverity.ERROR, context, 400,
        )


class ResourceNotFoundError(ULoggerError):
    """Requested record does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )


# ─── Programming Errors ─────────────────────────────────────────

class FormatError(ULoggerError):
    """Template placeholders and arguments do not match."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "FORMAT_ERROR", ErrorCategory.FORMAT,
            ErrorSeverity.ERROR, context, 500,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class ResourceLoadError(ULoggerError):
    """External script/stylesheet could not be fetched."""
    def __init__(self, resource_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.resource_id = resource_id
        super().__init__(
            f"error loading {resource_id} script",
            "RESOURCE_LOAD_FAILED", ErrorCategory.EXTERNAL_RESOURCE,
            ErrorSeverity.CRITICAL, ctx, 502,
        )
        self.resource_id = resource_id


class ResourceTimeoutError(ULoggerError):
    """External resource did not settle before the deadline."""
    def __init__(
        self, timeout_ms: int, resource_id: str | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource_id = resource_id
        super().__init__(
            f"timeout ({timeout_ms} ms).",
            "RESOURCE_TIMEOUT", ErrorCategory.TIMEOUT,
            ErrorSeverity.CRITICAL, ctx, 504,
        )
        self.timeout_ms = timeout_ms
        self.resource_id = resource_id


class DatabaseError(ULoggerError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
