r"""HTTP response handling utilities.

This module provides functions for classifying a completed exchange by
its status code and for exposing the response headers to callers.
"""

from __future__ import annotations

__all__ = ["collect_headers", "handle_status"]

import logging
from typing import TYPE_CHECKING

from nimbus.exceptions import ClientStatusError, ServerStatusError, UnexpectedStatusError

if TYPE_CHECKING:
    import httpx

logger: logging.Logger = logging.getLogger(__name__)


def collect_headers(response: httpx.Response) -> dict[str, str | list[str]]:
    """Return the response headers as a plain mapping.

    A header received once maps to its value; a header received several
    times maps to the list of its values, in order. Names are lower case,
    as reported by httpx.

    Args:
        response: The HTTP response.

    Returns:
        The header mapping.

    Example:
        ```pycon
        >>> import httpx
        >>> from nimbus.utils.response import collect_headers
        >>> response = httpx.Response(
        ...     200, headers=[("X-Id", "1"), ("Set-Cookie", "a=1"), ("Set-Cookie", "b=2")]
        ... )
        >>> collect_headers(response)
        {'x-id': '1', 'set-cookie': ['a=1', 'b=2']}

        ```
    """
    headers: dict[str, str | list[str]] = {}
    for name, value in response.headers.multi_items():
        if name not in headers:
            headers[name] = value
        elif isinstance(headers[name], list):
            headers[name].append(value)
        else:
            headers[name] = [headers[name], value]
    return headers


def handle_status(
    response: httpx.Response,
    url: str,
    method: str,
    headers: dict[str, str | list[str]],
) -> None:
    """Raise the error matching a non-2xx status code.

    The function returns without raising for 2xx status codes, so the
    caller can go on decoding the body.

    Args:
        response: The HTTP response.
        url: The URL that was requested, used in log messages.
        method: The HTTP method name (e.g., "GET", "POST"), used in log
            messages.
        headers: The response headers, attached to the raised error.

    Raises:
        ClientStatusError: If the status code is 4xx.
        ServerStatusError: If the status code is 5xx.
        UnexpectedStatusError: If the status code is in any other
            non-2xx range.
    """
    status = response.status_code
    if 200 <= status < 300:
        return

    logger.debug(f"{method} request to {url} failed with status {status}")
    if 400 <= status < 500:
        raise ClientStatusError(f"Client error: {status}", status=status, response=headers)
    if 500 <= status < 600:
        raise ServerStatusError(f"Server error: {status}", status=status, response=headers)
    raise UnexpectedStatusError(f"Unexpected status code: {status}", status=status, response=headers)
