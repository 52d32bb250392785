"""
Shared building blocks for outbound HTTP calls.

Provides:
- Unified exception hierarchy
"""

from .exceptions import (
    # API errors
    APIError,
    ClientError,
    # Configuration errors
    ConfigurationError,
    ErrorCategory,
    ErrorContext,
    ErrorSeverity,
    InvalidRequestError,
    NetworkError,
    # Base
    OutboundHttpError,
    RateLimitError,
    ResponseReadError,
    ServiceUnavailableError,
    # Validation errors
    ValidationError,
)

__all__ = [
    "OutboundHttpError",
    "ErrorContext",
    "ErrorSeverity",
    "ErrorCategory",
    "APIError",
    "RateLimitError",
    "ClientError",
    "ServiceUnavailableError",
    "NetworkError",
    "ResponseReadError",
    "ValidationError",
    "InvalidRequestError",
    "ConfigurationError",
]
