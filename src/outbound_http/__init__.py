"""
Outbound HTTP - a thin wrapper around single outbound HTTP calls.

Build a request, attach headers, send it, read the body, and get back either
the body or a typed error chosen by status code.

Usage:
    from outbound_http import FormRequest, Header, default_request

    body = default_request(
        FormRequest(base_url="https://api.example.com", endpoint="/items"),
        [Header("Authorization", "Bearer token")],
    )

Status handling:
    - 2xx returns the body
    - 429 blocks for 60 seconds, then raises RateLimitError
    - other 4xx raise ClientError (the body is kept on the error)
    - 5xx raise ServiceUnavailableError
    - anything else returns the body
"""

from .infrastructure.http import (
    FormRequest,
    Header,
    HttpClient,
    HttpResult,
    classify_response,
    configure_client,
    default_client,
    default_request,
    default_request_safe,
    get_client_config,
    process_status_code,
    read_resp_body,
    reset_client_config,
)
from .shared.exceptions import (
    APIError,
    ClientError,
    ConfigurationError,
    InvalidRequestError,
    NetworkError,
    OutboundHttpError,
    RateLimitError,
    ResponseReadError,
    ServiceUnavailableError,
    ValidationError,
)

__version__ = "0.1.0"

__all__ = [
    # Request building
    "FormRequest",
    "Header",
    # Client execution
    "HttpClient",
    "default_client",
    "default_request",
    "default_request_safe",
    # Response handling
    "HttpResult",
    "read_resp_body",
    "process_status_code",
    "classify_response",
    # Configuration
    "configure_client",
    "get_client_config",
    "reset_client_config",
    # Errors
    "OutboundHttpError",
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
