"""HTTP Client Utilities."""

from .client import (
    HttpClient,
    default_client,
    default_request,
    default_request_safe,
)
from .config import configure_client, get_client_config, reset_client_config
from .request import FormRequest, Header
from .response import HttpResult, classify_response, process_status_code, read_resp_body

__all__ = [
    # Request building
    "FormRequest",
    "Header",
    # Client execution
    "HttpClient",
    "default_client",
    # Response handling
    "HttpResult",
    "read_resp_body",
    "process_status_code",
    "classify_response",
    # Core request functions
    "default_request",
    "default_request_safe",
    # Configuration
    "configure_client",
    "get_client_config",
    "reset_client_config",
]
