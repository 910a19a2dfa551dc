r"""Parameter validation utilities for HTTP requests.

This module provides validation functions to ensure request parameters
meet the required constraints before a request is dispatched.
"""

from __future__ import annotations

__all__ = ["validate_method", "validate_timeout"]

from nimbus.core.constants import HTTP_METHODS


def validate_timeout(timeout: float | None) -> None:
    """Validate timeout parameter.

    Args:
        timeout: Maximum seconds to wait for the request to complete.
            Must be > 0 if provided.

    Raises:
        ValueError: If timeout is a numeric value <= 0.

    Example:
        ```pycon
        >>> from nimbus.core.validation import validate_timeout
        >>> validate_timeout(10.0)
        >>> validate_timeout(None)
        >>> validate_timeout(0)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: timeout must be > 0, got 0

        ```
    """
    if timeout is not None and timeout <= 0:
        msg = f"timeout must be > 0, got {timeout}"
        raise ValueError(msg)


def validate_method(method: str) -> None:
    """Validate the HTTP method.

    Args:
        method: The HTTP method name. Must be one of GET, POST, PUT,
            PATCH or DELETE (upper case).

    Raises:
        ValueError: If the method is not supported.

    Example:
        ```pycon
        >>> from nimbus.core.validation import validate_method
        >>> validate_method("GET")
        >>> validate_method("HEAD")  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: method must be one of ('GET', 'POST', 'PUT', 'PATCH', 'DELETE'), got 'HEAD'

        ```
    """
    if method not in HTTP_METHODS:
        msg = f"method must be one of {HTTP_METHODS}, got {method!r}"
        raise ValueError(msg)
