"""Error Hierarchy - typed, categorized exceptions for the name service.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; internal errors (500-level) are critical
    - to_response() produces the same success/message envelope the routes return,
      with an extra "error" object
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with PickstreamError base: the global handler catches all
    - The store never raises these: routes translate its boolean results into them
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
    CONFLICT = "conflict"
    RESOURCE_NOT_FOUND = "resource_not_found"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Extra context for logs; only the timestamp reaches the client."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    name: str | None = None
    debug_info: dict[str, Any] | None = None


class PickstreamError(Exception):
    """Base exception for all Pickstream errors."""

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
        """Convert to the standard error envelope."""
        return {
            "success": False,
            "message": self.message,
            "error": {
                "code": self.code,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
            },
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class InvalidNameError(PickstreamError):
    """Name is missing, empty or whitespace-only."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Name cannot be empty",
            "INVALID_NAME", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class DuplicateNameError(PickstreamError):
    """Store rejected the add (name already present)."""
    def __init__(self, name: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.name = name
        super().__init__(
            "Name already exists or is invalid",
            "DUPLICATE_NAME", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, ctx, 400,
        )
        self.name = name
