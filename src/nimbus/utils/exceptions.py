r"""Exception handling utilities for HTTP requests.

This module converts the exceptions raised by httpx (and by the request
deadline) into nimbus errors. There is no retry: every failure is final
for the call.
"""

from __future__ import annotations

__all__ = ["handle_request_error", "handle_timeout_exception"]

import logging
from typing import NoReturn

from nimbus.exceptions import RequestTimeoutError, TransportError

logger: logging.Logger = logging.getLogger(__name__)


def handle_timeout_exception(exc: BaseException, url: str, method: str) -> NoReturn:
    """Handle a request that did not complete in time.

    Args:
        exc: The timeout exception (``asyncio.TimeoutError`` raised by the
            request deadline, or ``httpx.TimeoutException``).
        url: The URL that was requested, used in log messages.
        method: The HTTP method name (e.g., "GET", "POST"), used in log
            messages.

    Raises:
        RequestTimeoutError: Always. The original exception is chained as
            the cause.
    """
    logger.debug(f"{method} request to {url} timed out")
    raise RequestTimeoutError("Request timed out") from exc


def handle_request_error(exc: Exception, url: str, method: str) -> NoReturn:
    """Handle network and connection errors during HTTP requests.

    This covers DNS failures, refused or reset connections, write errors
    and unsupported protocols (any ``httpx.RequestError`` that is not a
    timeout).

    Args:
        exc: The request error that was raised.
        url: The URL that was requested, used in log messages.
        method: The HTTP method name (e.g., "GET", "POST"), used in log
            messages.

    Raises:
        TransportError: Always, with a message wrapping the description of
            the original exception, which is chained as the cause.
    """
    error_type = type(exc).__name__
    logger.debug(f"{method} request to {url} encountered {error_type}: {exc}")
    raise TransportError(f"{method} request to {url} failed: {error_type}: {exc}") from exc
