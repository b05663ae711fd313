"""Error Hierarchy: typed, categorized exceptions for DebugVault failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - The search engine never raises; these errors belong to drafts and services
    - to_dict() produces a JSON-safe envelope for logs and callers

Design Decisions:
    - Single hierarchy with DebugVaultError base: callers catch one type
    - ErrorContext as dataclass: rich observability without coupling to logging
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and caller handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    EXTERNAL_API = "external_api"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: str | None = None
    session_id: str | None = None
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class DebugVaultError(Exception):
    """Base exception for all DebugVault errors."""

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

    @property
    def recoverable(self) -> bool:
        return self.severity in (ErrorSeverity.INFO, ErrorSeverity.WARNING)

    def to_dict(self) -> dict:
        """Convert to a standardized error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "user_id": self.context.user_id,
                    "session_id": self.context.session_id,
                    "operation": self.context.operation,
                },
            }
        }


# ─── Domain Errors ──────────────────────────────────────────────

class DraftValidationError(DebugVaultError):
    """Create-form payload failed validation."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context,
        )
        self.field = field


class ResourceNotFoundError(DebugVaultError):
    """Requested record does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Collaborator Errors ────────────────────────────────────────

class DataSourceError(DebugVaultError):
    """Identity provider or document store call failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            f"Data source {operation} failed: {message}",
            "DATA_SOURCE_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, ctx,
        )
        self.operation = operation
