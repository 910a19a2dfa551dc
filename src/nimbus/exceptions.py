r"""Define the exceptions raised by nimbus.

Every failure of a request surfaces as a ``NimbusError``. Subclasses
identify the kind of failure so callers can catch a specific one while
``except NimbusError`` still catches all of them.
"""

from __future__ import annotations

__all__ = [
    "ClientStatusError",
    "DecodeError",
    "InvalidURLError",
    "NimbusError",
    "RequestTimeoutError",
    "ServerStatusError",
    "TransportError",
    "UnexpectedStatusError",
]

from typing import Any


class NimbusError(Exception):
    r"""Structured error raised when an HTTP request fails.

    Args:
        message: A human-readable description of the failure.
        status: The HTTP status code, if a response was received.
        response: Optional payload describing the response (for status
            errors, the response headers).

    Attributes:
        name: Fixed tag identifying the error family.

    Example:
        ```pycon
        >>> from nimbus.exceptions import NimbusError
        >>> error = NimbusError("Client error: 404", status=404, response={"x-id": "1"})
        >>> error.name
        'NimbusError'
        >>> error.status
        404
        >>> str(error)
        'Client error: 404'

        ```
    """

    name = "NimbusError"

    def __init__(self, message: str, status: int | None = None, response: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.status = status
        self.response = response

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, status={self.status!r})"


class InvalidURLError(NimbusError):
    r"""Raised when the request URL is not a well-formed absolute URL."""


class ClientStatusError(NimbusError):
    r"""Raised when the server answers with a 4xx status code."""


class ServerStatusError(NimbusError):
    r"""Raised when the server answers with a 5xx status code."""


class UnexpectedStatusError(NimbusError):
    r"""Raised for status codes outside the 2xx, 4xx and 5xx ranges."""


class RequestTimeoutError(NimbusError):
    r"""Raised when a request does not complete within its timeout."""


class TransportError(NimbusError):
    r"""Raised when the connection fails (DNS, refused, reset, ...)."""


class DecodeError(NimbusError):
    r"""Raised when the response body cannot be decoded.

    This covers both unsupported response formats and malformed bodies.
    """
