"""
Pytest configuration and shared fixtures.
"""

from __future__ import annotations

from collections.abc import Callable
from unittest.mock import patch

import httpx
import pytest

from outbound_http.infrastructure.http.client import HttpClient
from outbound_http.infrastructure.http.config import reset_client_config

BASE_URL = "https://api.test.com"

Handler = Callable[[httpx.Request], httpx.Response]


# ============================================================
# Configuration Fixtures
# ============================================================


@pytest.fixture(autouse=True)
def _restore_client_config():
    """Every test starts and ends with the built-in defaults."""
    reset_client_config()
    yield
    reset_client_config()


@pytest.fixture
def no_sleep():
    """Patch out the 429 pause so tests never block."""
    with patch("outbound_http.infrastructure.http.response.time.sleep") as mock_sleep:
        yield mock_sleep


# ============================================================
# Mock HTTP Fixtures
# ============================================================


@pytest.fixture
def make_response():
    """Build a response already attached to a request."""

    def _make(status_code: int, content: bytes = b"", url: str = f"{BASE_URL}/data") -> httpx.Response:
        return httpx.Response(status_code, content=content, request=httpx.Request("GET", url))

    return _make


@pytest.fixture
def mock_client():
    """Build an HttpClient whose transport is answered by a handler."""

    def _make(handler: Handler, **kwargs) -> HttpClient:
        return HttpClient(transport=httpx.MockTransport(handler), **kwargs)

    return _make


@pytest.fixture
def route_default_client():
    """
    Route default_client through a MockTransport.

    Usage:
        sent = route_default_client(lambda request: httpx.Response(200, content=b"ok"))
        default_request(FormRequest(base_url=BASE_URL))
        assert sent[0].url == ...
    """
    patches = []

    def _route(handler: Handler) -> list[httpx.Request]:
        sent: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            sent.append(request)
            return handler(request)

        def _default_client(request: httpx.Request) -> httpx.Response:
            return HttpClient(transport=httpx.MockTransport(_record), timeout=10.0).do_request(request)

        p = patch("outbound_http.infrastructure.http.client.default_client", side_effect=_default_client)
        p.start()
        patches.append(p)
        return sent

    yield _route

    for p in patches:
        p.stop()
