"""Error Hierarchy — typed, categorized exceptions for all MemoLab failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Argument errors (400-level) are the caller's fault; NetworkError (502) is the loader's upstream
    - to_response() produces the REST envelope used by the global handlers
    - Timer, counter and memo cells never raise these on their own — faults pass through

Design Decisions:
    - Single hierarchy with MemoLabError base: FastAPI global handler catches all (ADR: uniform error shape)
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
    RESOURCE_NOT_FOUND = "resource_not_found"
    EXTERNAL_API = "external_api"
    CONFLICT = "conflict"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    session_id: str | None = None
    demo: str | None = None
    path: str | None = None
    debug_info: dict[str, Any] | None = None


class MemoLabError(Exception):
    """Base exception for all MemoLab errors."""

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
                    "session_id": self.context.session_id,
                    "demo": self.context.demo,
                    "path": self.context.path,
                },
            }
        }


# ─── Caller Errors (400-level) ──────────────────────────────────

class InvalidArgumentError(MemoLabError):
    """Input outside the domain of a compute utility or route binding."""
    def __init__(self, message: str, argument: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_ARGUMENT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.argument = argument


class ResourceNotFoundError(MemoLabError):
    """Requested resource does not exist."""
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


class NavigationAbandonedError(MemoLabError):
    """A navigation was superseded before its loader settled."""
    def __init__(self, path: str, superseded_by: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.path = path
        super().__init__(
            f"Navigation to '{path}' abandoned in favour of '{superseded_by}'",
            "NAVIGATION_ABANDONED", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, ctx, 409,
        )
        self.superseded_by = superseded_by


# ─── Upstream Errors (500-level) ────────────────────────────────

class NetworkError(MemoLabError):
    """Loader HTTP call failed — non-2xx, transport failure, or malformed body."""
    def __init__(
        self,
        message: str,
        url: str,
        status_code: int | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "NETWORK_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, context, 502,
        )
        self.url = url
        self.status_code = status_code
