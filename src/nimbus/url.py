r"""URL construction and transport selection.

``build_url`` composes the request URL from a base address, a path and
query parameters. ``validate_url`` and ``select_transport`` run right
before a request is sent: a malformed URL fails fast, before any
connection is opened.
"""

from __future__ import annotations

__all__ = ["Transport", "build_url", "select_transport", "validate_url"]

import logging
from enum import Enum
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

import httpx

from nimbus.exceptions import InvalidURLError

if TYPE_CHECKING:
    from collections.abc import Mapping

logger: logging.Logger = logging.getLogger(__name__)

# Characters left unescaped in query keys and values, on top of the
# unreserved set that ``quote`` always keeps
_QUERY_SAFE_CHARS = "!*'()"


class Transport(Enum):
    """Transport carrying one HTTP exchange.

    Attributes:
        PLAIN: Plaintext TCP.
        TLS: TCP wrapped in TLS.
    """

    PLAIN = "plain"
    TLS = "tls"


def build_url(base_url: str | None, path: str, query_params: Mapping[str, Any] | None = None) -> str:
    """Compose a base address, a path and query parameters into one URL.

    Base and path are joined with exactly one slash when the base is not
    empty. Query keys and values are percent-encoded. The result is not
    validated.

    Args:
        base_url: The base address. ``None`` or an empty string leaves
            the path untouched, so an absolute URL can be passed as path.
        path: The request path.
        query_params: Optional query parameters. Values are converted
            with ``str``.

    Returns:
        The composed URL.

    Example:
        ```pycon
        >>> from nimbus.url import build_url
        >>> build_url("https://api.example.com", "users/1")
        'https://api.example.com/users/1'
        >>> build_url("https://api.example.com/", "/users", {"q": "a b", "page": 2})
        'https://api.example.com/users?q=a%20b&page=2'
        >>> build_url(None, "https://api.example.com/todos/1")
        'https://api.example.com/todos/1'

        ```
    """
    url = path
    if base_url:
        url = base_url if not path else f"{base_url.rstrip('/')}/{path.lstrip('/')}"
    if query_params:
        query = "&".join(
            f"{quote(str(key), safe=_QUERY_SAFE_CHARS)}={quote(str(value), safe=_QUERY_SAFE_CHARS)}"
            for key, value in query_params.items()
        )
        url = f"{url}?{query}"
    return url


def validate_url(url: str) -> httpx.URL:
    """Check that a URL is a well-formed absolute URL.

    Args:
        url: The URL to check.

    Returns:
        The parsed URL.

    Raises:
        InvalidURLError: If the URL cannot be parsed or has no scheme or
            no host.

    Example:
        ```pycon
        >>> from nimbus.url import validate_url
        >>> validate_url("https://api.example.com/users").host
        'api.example.com'
        >>> validate_url("/users")  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        nimbus.exceptions.InvalidURLError: Invalid URL provided

        ```
    """
    try:
        parsed = httpx.URL(url)
    except (httpx.InvalidURL, TypeError) as exc:
        logger.debug(f"Could not parse URL {url!r}: {exc}")
        raise InvalidURLError("Invalid URL provided") from exc
    if not parsed.scheme or not parsed.host:
        logger.debug(f"URL {url!r} has no scheme or host")
        raise InvalidURLError("Invalid URL provided")
    return parsed


def select_transport(url: str | httpx.URL) -> Transport:
    """Select the transport for a URL from its scheme.

    Args:
        url: The request URL.

    Returns:
        ``Transport.TLS`` for ``https`` URLs, ``Transport.PLAIN``
        otherwise.

    Example:
        ```pycon
        >>> from nimbus.url import select_transport
        >>> select_transport("https://api.example.com")
        <Transport.TLS: 'tls'>
        >>> select_transport("http://localhost:8000")
        <Transport.PLAIN: 'plain'>

        ```
    """
    scheme = url.scheme if isinstance(url, httpx.URL) else url.split(":", 1)[0].lower()
    return Transport.TLS if scheme == "https" else Transport.PLAIN
