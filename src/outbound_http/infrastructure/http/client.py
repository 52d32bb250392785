"""
HTTP Client Module - one configurable client per call.

This module provides:
- HttpClient: transport, redirect policy, cookie jar and timeout for a single call
- default_client: executes a request with the default timeout
- default_request: form request -> add headers -> send -> classify status
- default_request_safe: same flow, reported as an HttpResult instead of raised

Usage:
    from outbound_http.infrastructure.http.client import default_request
    from outbound_http.infrastructure.http.request import FormRequest, Header

    body = default_request(
        FormRequest(base_url="https://api.example.com", endpoint="/items"),
        [Header("Accept", "application/json")],
    )
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import httpx

from outbound_http.infrastructure.http.config import _config
from outbound_http.infrastructure.http.response import (
    HttpResult,
    classify_response,
    process_status_code,
)
from outbound_http.shared.exceptions import ErrorContext, NetworkError, OutboundHttpError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from outbound_http.infrastructure.http.request import FormRequest, Header

logger = logging.getLogger(__name__)


@dataclass
class HttpClient:
    """
    Settings for the client used to perform a call.

    A fresh httpx.Client is built from these fields on every do_request()
    and closed once the response body has been loaded.

    Attributes:
        transport: Custom transport (None uses the httpx default)
        follow_redirects: Whether redirects are followed
        max_redirects: Maximum redirects followed per call
        cookies: Cookie jar sent with the request and updated from responses
        timeout: Timeout in seconds (None disables the timeout)
    """

    transport: httpx.BaseTransport | None = None
    follow_redirects: bool = True
    max_redirects: int = 10
    cookies: httpx.Cookies | dict[str, str] | None = None
    timeout: float | None = None

    def __post_init__(self) -> None:
        if isinstance(self.cookies, dict):
            self.cookies = httpx.Cookies(self.cookies)

    def _client_kwargs(self) -> dict[str, Any]:
        return {
            "transport": self.transport,
            "follow_redirects": self.follow_redirects,
            "max_redirects": self.max_redirects,
            "cookies": self.cookies,
            "timeout": self.timeout,
        }

    def do_request(self, request: httpx.Request) -> httpx.Response:
        """
        Perform the HTTP request and return the response.

        Args:
            request: Request built by FormRequest.form_request()

        Returns:
            httpx.Response with its body already loaded

        Raises:
            NetworkError: When the request could not be completed
        """
        context = ErrorContext(operation="do_request", input_value=str(request.url))
        try:
            with httpx.Client(**self._client_kwargs()) as client:
                # send() skips the timeout and jar for requests not built by this client
                request.extensions.setdefault("timeout", client.timeout.as_dict())
                if self.cookies:
                    client.cookies.set_cookie_header(request)
                response = client.send(request)
                # httpx.Client works on a copy of the jar
                if self.cookies is not None:
                    self.cookies.update(client.cookies)
                return response
        except httpx.TimeoutException as e:
            logger.exception("Error performing HTTP request")
            raise NetworkError(f"Request timeout after {self.timeout}s", context=context) from e
        except httpx.RequestError as e:
            logger.exception("Error performing HTTP request")
            raise NetworkError(f"Request failed: {e}", context=context) from e


def default_client(request: httpx.Request) -> httpx.Response:
    """Execute a request with the default timeout (10s unless reconfigured)."""
    return HttpClient(timeout=_config["timeout"]).do_request(request)


def _prepare(form_request: FormRequest, headers: Iterable[Header] | None) -> httpx.Request:
    try:
        request = form_request.form_request()
    except OutboundHttpError:
        logger.exception("Incorrect parameters set in form request")
        raise

    # add each header provided to the request
    for header in headers or ():
        header.add_header(request)
    return request


def default_request(
    form_request: FormRequest,
    headers: Iterable[Header] | None = None,
) -> bytes:
    """
    Standard way to perform an HTTP call.

    Args:
        form_request: Base URL, endpoint, payload and method
        headers: Headers added to the request in order

    Returns:
        Response body

    Raises:
        InvalidRequestError: When the request cannot be formed
        NetworkError: When the request could not be completed
        RateLimitError: HTTP 429, after the rate-limit pause
        ClientError: Any other 4xx (body on ``error.body``)
        ServiceUnavailableError: Any 5xx
    """
    request = _prepare(form_request, headers)
    response = default_client(request)
    return process_status_code(response)


def default_request_safe(
    form_request: FormRequest,
    headers: Iterable[Header] | None = None,
) -> HttpResult:
    """
    Version of default_request that reports errors in the result.

    Library errors end up in ``HttpResult.error``; a 4xx result keeps its body.
    """
    try:
        request = _prepare(form_request, headers)
        response = default_client(request)
    except OutboundHttpError as e:
        return HttpResult(error=e)
    return classify_response(response)
