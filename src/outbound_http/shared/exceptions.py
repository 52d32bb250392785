"""
Unified Exception Hierarchy for outbound HTTP calls.

Exception Hierarchy:
    OutboundHttpError (base)
    ├── APIError
    │   ├── RateLimitError
    │   ├── ClientError
    │   ├── ServiceUnavailableError
    │   └── NetworkError
    │       └── ResponseReadError
    ├── ValidationError
    │   └── InvalidRequestError
    └── ConfigurationError
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any


class ErrorSeverity(Enum):
    """Severity levels for errors."""
    WARNING = auto()      # Recoverable, can continue
    ERROR = auto()        # Failed but can retry
    CRITICAL = auto()     # Cannot continue
    TRANSIENT = auto()    # Temporary, caller may retry later


class ErrorCategory(Enum):
    """Categories for error classification."""
    API = "api"
    VALIDATION = "validation"
    CONFIGURATION = "config"
    NETWORK = "network"


@dataclass(frozen=True, slots=True)
class ErrorContext:
    """Rich context attached to every library error."""
    operation: str | None = None
    input_value: Any = None
    suggestion: str | None = None
    retry_after: float | None = None
    metadata: dict[str, Any] = field(default_factory=dict)


class OutboundHttpError(Exception):
    """
    Base exception for all outbound HTTP errors.

    Provides:
    - Structured error context
    - Severity classification
    - Retry guidance
    """

    def __init__(
        self,
        message: str,
        *,
        context: ErrorContext | None = None,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        category: ErrorCategory = ErrorCategory.API,
        retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.context = context or ErrorContext()
        self.severity = severity
        self.category = category
        self.retryable = retryable

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result: dict[str, Any] = {
            "error": str(self),
            "category": self.category.value,
            "severity": self.severity.name.lower(),
            "retryable": self.retryable,
        }
        if self.context.operation:
            result["operation"] = self.context.operation
        if self.context.suggestion:
            result["suggestion"] = self.context.suggestion
        if self.context.retry_after is not None:
            result["retry_after_seconds"] = self.context.retry_after
        if self.context.metadata:
            result["metadata"] = dict(self.context.metadata)
        return result


def _with_suggestion(context: ErrorContext | None, suggestion: str, **overrides: Any) -> ErrorContext:
    """Copy a context, filling in a default suggestion and any overrides."""
    ctx = context or ErrorContext()
    values = {
        "operation": ctx.operation,
        "input_value": ctx.input_value,
        "suggestion": ctx.suggestion or suggestion,
        "retry_after": ctx.retry_after,
        "metadata": ctx.metadata,
    }
    values.update(overrides)
    return ErrorContext(**values)


# =============================================================================
# API Errors
# =============================================================================

class APIError(OutboundHttpError):
    """Base class for errors reported by, or on the way to, a remote service."""

    def __init__(
        self,
        message: str,
        *,
        context: ErrorContext | None = None,
        retryable: bool = True,
    ) -> None:
        super().__init__(
            message,
            context=context,
            severity=ErrorSeverity.ERROR,
            category=ErrorCategory.API,
            retryable=retryable,
        )


class RateLimitError(APIError):
    """Raised after the rate-limit pause when the service answered 429."""

    def __init__(
        self,
        message: str = "rate limit exceed",
        *,
        retry_after: float | None = None,
        context: ErrorContext | None = None,
    ) -> None:
        ctx = _with_suggestion(
            context,
            "Slow down the request rate before calling again",
            retry_after=retry_after,
        )
        super().__init__(message, context=ctx, retryable=True)
        self.status_code = 429
        self.severity = ErrorSeverity.TRANSIENT


class ClientError(APIError):
    """Raised for 4xx responses other than 429. Keeps the response body."""

    def __init__(
        self,
        message: str = "40X received; check request",
        *,
        status_code: int = 400,
        body: bytes | None = None,
        context: ErrorContext | None = None,
    ) -> None:
        ctx = _with_suggestion(context, "Check the URL, method, headers and payload")
        super().__init__(message, context=ctx, retryable=False)
        self.status_code = status_code
        self.body = body


class ServiceUnavailableError(APIError):
    """Raised for 5xx responses."""

    def __init__(
        self,
        message: str = "50X received; check network/service availability",
        *,
        status_code: int = 500,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(message, context=context, retryable=True)
        self.status_code = status_code
        self.severity = ErrorSeverity.TRANSIENT


class NetworkError(APIError):
    """Raised for network connectivity issues."""

    def __init__(
        self,
        message: str = "Network connection failed",
        *,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(message, context=context, retryable=True)
        self.category = ErrorCategory.NETWORK


class ResponseReadError(NetworkError):
    """Raised when the response body cannot be read in full."""

    def __init__(
        self,
        message: str = "error reading http body",
        *,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(message, context=context)


# =============================================================================
# Validation Errors
# =============================================================================

class ValidationError(OutboundHttpError):
    """Base class for validation errors."""

    def __init__(
        self,
        message: str,
        *,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(
            message,
            context=context,
            severity=ErrorSeverity.WARNING,
            category=ErrorCategory.VALIDATION,
            retryable=False,
        )


class InvalidRequestError(ValidationError):
    """Raised when a request cannot be formed from its parts."""

    def __init__(
        self,
        reason: str,
        *,
        url: str | None = None,
        method: str | None = None,
        context: ErrorContext | None = None,
    ) -> None:
        ctx = _with_suggestion(
            context,
            "Check base_url, endpoint and method",
            operation=(context.operation if context else None) or "form_request",
            input_value={"url": url, "method": method},
        )
        super().__init__(f"Invalid request: {reason}", context=ctx)
        self.url = url
        self.method = method


# =============================================================================
# Configuration Errors
# =============================================================================

class ConfigurationError(OutboundHttpError):
    """Raised for configuration-related errors."""

    def __init__(
        self,
        message: str,
        *,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(
            message,
            context=context,
            severity=ErrorSeverity.CRITICAL,
            category=ErrorCategory.CONFIGURATION,
            retryable=False,
        )
