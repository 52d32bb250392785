"""
Request building - turn a base URL, endpoint, payload and method into an httpx.Request.

Usage:
    from outbound_http.infrastructure.http.request import FormRequest, Header

    request = FormRequest(base_url="https://api.example.com", endpoint="/items", method="POST",
                          payload=b'{"name": "x"}').form_request()
    Header("Content-Type", "application/json").add_header(request)
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

import httpx

from outbound_http.shared.exceptions import InvalidRequestError

logger = logging.getLogger(__name__)

# RFC 9110 token characters
_METHOD_TOKEN = re.compile(r"^[!#$%&'*+\-.^_`|~0-9A-Za-z]+$")


@dataclass
class FormRequest:
    """
    Basic fields needed for an HTTP request.

    The URL is ``base_url + endpoint`` exactly as given; no slashes are added
    or removed.
    """

    base_url: str
    endpoint: str = ""
    payload: bytes = b""
    method: str = "GET"

    @property
    def url(self) -> str:
        return self.base_url + self.endpoint

    def form_request(self) -> httpx.Request:
        """
        Create a new HTTP request.

        Returns:
            httpx.Request carrying the payload as its raw body

        Raises:
            InvalidRequestError: When the method is not an HTTP token or the URL cannot be parsed
        """
        url = self.url
        logger.debug(f"URL: {url}")

        method = (self.method or "GET").upper()
        if not _METHOD_TOKEN.match(method):
            logger.debug("Error forming HTTP request")
            raise InvalidRequestError(f"invalid method {self.method!r}", url=url, method=self.method)

        try:
            return httpx.Request(method, url, content=bytes(self.payload))
        except httpx.InvalidURL as e:
            logger.debug("Error forming HTTP request")
            raise InvalidRequestError(str(e), url=url, method=method) from e


@dataclass(frozen=True)
class Header:
    """A single key/value pair to add to a request. Use one per header."""

    key: str
    value: str

    def add_header(self, request: httpx.Request) -> httpx.Request:
        """
        Add this header to the request.

        Existing values for the same key are kept, so adding a key twice
        sends it twice. Values outside ASCII are sent as UTF-8.
        """
        request.headers = httpx.Headers([*request.headers.raw, (self.key.encode(), self.value.encode("utf-8"))])
        return request
