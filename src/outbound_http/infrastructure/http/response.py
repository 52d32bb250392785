"""
Response handling - read the body and classify the status code.

Classification policy:
    2xx     -> body
    429     -> sleep for the configured pause, then RateLimitError (no body)
    4xx     -> ClientError carrying the body
    5xx     -> ServiceUnavailableError (no body)
    other   -> body (1xx/3xx and odd codes count as a good response)
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

import httpx

from outbound_http.infrastructure.http.config import _config
from outbound_http.shared.exceptions import (
    ClientError,
    ErrorContext,
    OutboundHttpError,
    RateLimitError,
    ResponseReadError,
    ServiceUnavailableError,
)

logger = logging.getLogger(__name__)

HTTP_TOO_MANY_REQUESTS = 429


@dataclass(frozen=True)
class HttpResult:
    """Uniform (body, error) outcome of a call."""

    body: bytes | None = None
    error: OutboundHttpError | None = None
    status_code: int | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> bytes | None:
        """Return the body, or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.body


def _request_url(response: httpx.Response) -> str | None:
    """URL of the request behind a response, if it is known."""
    try:
        return str(response.request.url)
    except RuntimeError:
        return None


def read_resp_body(response: httpx.Response) -> bytes:
    """
    Read and return the whole response body, then close the response.

    The body is read in one go; larger responses should be streamed by the caller.

    Raises:
        ResponseReadError: When the body cannot be read
    """
    try:
        return response.read()
    except (httpx.StreamError, httpx.RequestError) as e:
        raise ResponseReadError(
            f"error reading http body: {e}",
            context=ErrorContext(operation="read_resp_body", input_value=_request_url(response)),
        ) from e
    finally:
        response.close()


def process_status_code(response: httpx.Response) -> bytes:
    """
    Read the body and map the status code to a result.

    Args:
        response: A response returned by the client executor

    Returns:
        Response body for 2xx and any status outside 4xx/5xx

    Raises:
        RateLimitError: HTTP 429, after blocking for the rate-limit pause
        ClientError: Any other 4xx; the body is on ``error.body``
        ServiceUnavailableError: Any 5xx
        ResponseReadError: When the body cannot be read
    """
    try:
        body = read_resp_body(response)
    except ResponseReadError:
        logger.exception("error reading http body")
        raise

    status = response.status_code
    url = _request_url(response)
    context = ErrorContext(
        operation="process_status_code",
        input_value=url,
        metadata={"status_code": status},
    )

    if 200 <= status < 300:
        return body

    if 400 <= status < 500:
        if status == HTTP_TOO_MANY_REQUESTS:
            pause = _config["rate_limit_sleep"]
            logger.warning(f"Rate limited (429) for {url}, sleeping {pause:.1f}s before failing")
            time.sleep(pause)
            raise RateLimitError(context=context)
        raise ClientError(status_code=status, body=body, context=context)

    if 500 <= status < 600:
        raise ServiceUnavailableError(status_code=status, context=context)

    # Odd status code, assume a good response
    return body


def classify_response(response: httpx.Response) -> HttpResult:
    """Same policy as process_status_code, returned as an HttpResult instead of raised."""
    status = response.status_code
    try:
        return HttpResult(body=process_status_code(response), status_code=status)
    except ClientError as e:
        return HttpResult(body=e.body, error=e, status_code=status)
    except OutboundHttpError as e:
        return HttpResult(error=e, status_code=status)
