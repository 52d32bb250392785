"""
Client defaults shared by the default client and the response classifier.

Usage:
    from outbound_http.infrastructure.http.config import configure_client

    configure_client(timeout=5.0)          # default client timeout
    configure_client(rate_limit_sleep=1)   # pause before reporting a 429
"""

from __future__ import annotations

import logging
from typing import Any

from outbound_http.shared.exceptions import ConfigurationError, ErrorContext

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0
DEFAULT_RATE_LIMIT_SLEEP = 60.0

# Global configuration
_config: dict[str, Any] = {
    "timeout": DEFAULT_TIMEOUT,
    "rate_limit_sleep": DEFAULT_RATE_LIMIT_SLEEP,
}


def _check_non_negative(name: str, value: float) -> None:
    if value < 0:
        raise ConfigurationError(
            f"{name} must be >= 0, got {value!r}",
            context=ErrorContext(operation="configure_client", input_value=value),
        )


def configure_client(
    timeout: float | None = None,
    rate_limit_sleep: float | None = None,
) -> None:
    """
    Configure client defaults. Only the arguments passed are changed.

    Args:
        timeout: Timeout in seconds used by default_client
        rate_limit_sleep: Seconds to block on HTTP 429 before raising

    Raises:
        ConfigurationError: When a value is negative
    """
    if timeout is not None:
        _check_non_negative("timeout", timeout)
        _config["timeout"] = float(timeout)
    if rate_limit_sleep is not None:
        _check_non_negative("rate_limit_sleep", rate_limit_sleep)
        _config["rate_limit_sleep"] = float(rate_limit_sleep)

    logger.debug(f"Client configured: timeout={_config['timeout']}s, rate_limit_sleep={_config['rate_limit_sleep']}s")


def get_client_config() -> dict[str, Any]:
    """
    Get current client defaults.

    Returns:
        Copy of the defaults table
    """
    return dict(_config)


def reset_client_config() -> None:
    """Restore the built-in defaults."""
    _config["timeout"] = DEFAULT_TIMEOUT
    _config["rate_limit_sleep"] = DEFAULT_RATE_LIMIT_SLEEP
