r"""Configuration dataclass for nimbus clients.

This module re-exports the default constants used by the request
dispatcher and provides the ``ClientConfig`` dataclass accepted by
``nimbus.create``.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_CONTENT_TYPE",
    "DEFAULT_RESPONSE_TYPE",
    "DEFAULT_TIMEOUT",
    "HTTP_METHODS",
    "ClientConfig",
]

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from nimbus.core.constants import (
    DEFAULT_CONTENT_TYPE,
    DEFAULT_RESPONSE_TYPE,
    DEFAULT_TIMEOUT,
    HTTP_METHODS,
)
from nimbus.core.validation import validate_timeout

if TYPE_CHECKING:
    from collections.abc import Callable


@dataclass
class ClientConfig:
    """Configuration accepted by ``nimbus.create``.

    Only ``base_url`` is wired into the client returned by the factory.
    The other fields are validated and kept on ``client.config`` but do
    not change how requests are dispatched.

    Args:
        base_url: Base address prepended to every request path.
        with_credentials: Whether credentials should be sent with requests.
        headers: Default headers for requests.
        transform_request: Transformation function for request data.
        transform_response: Transformation function for response data.
        timeout: Timeout in seconds for requests. Must be > 0 if provided.
        validate_status: Status-validation rule, either a status code or a
            predicate over the status code.
        response_type: Default response format.

    Example:
        ```pycon
        >>> from nimbus.core.config import ClientConfig
        >>> config = ClientConfig(base_url="https://api.example.com")
        >>> config.base_url
        'https://api.example.com'
        >>> merged = config.merge(timeout=5.0)
        >>> merged.timeout
        5.0
        >>> config.timeout is None  # Original unchanged
        True

        ```
    """

    base_url: str
    with_credentials: bool = False
    headers: dict[str, Any] | None = None
    transform_request: Callable[[Any], Any] | None = None
    transform_response: Callable[[Any], Any] | None = None
    timeout: float | None = None
    validate_status: int | Callable[[int], bool] | None = None
    response_type: str | None = None

    def __post_init__(self) -> None:
        """Validate configuration parameters after initialization.

        Raises:
            ValueError: If any parameter fails validation.
        """
        validate_timeout(self.timeout)

    def merge(self, **overrides: Any) -> ClientConfig:
        """Create a new config with specified parameters overridden.

        Only non-None override values are applied.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new ClientConfig instance with overrides applied.
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)
