r"""Shared client accessor and client factory.

``get_client`` returns one process-wide client, created on first use
with no base address and reused afterwards. ``create`` builds a new
client from a ``ClientConfig``.
"""

from __future__ import annotations

__all__ = ["create", "get_client"]

import logging
import threading

from nimbus.client_async import AsyncNimbusClient
from nimbus.core.config import ClientConfig

logger: logging.Logger = logging.getLogger(__name__)

_shared_client: AsyncNimbusClient | None = None
_shared_client_lock = threading.Lock()


def get_client() -> AsyncNimbusClient:
    """Return the process-wide shared client.

    The client is created on the first call, with no base address, and
    the same instance is returned by every later call. Creation is
    guarded by a lock so concurrent first calls build a single client.

    Returns:
        The shared client.

    Example:
        ```pycon
        >>> from nimbus import get_client
        >>> get_client() is get_client()
        True

        ```
    """
    global _shared_client  # noqa: PLW0603
    if _shared_client is None:
        with _shared_client_lock:
            if _shared_client is None:
                logger.debug("Creating the shared nimbus client")
                _shared_client = AsyncNimbusClient()
    return _shared_client


def create(config: ClientConfig) -> AsyncNimbusClient:
    """Create a client from a configuration.

    Only ``config.base_url`` is applied to the client. The other fields
    (credentials flag, headers, transform functions, timeout, status
    validation, response type) are kept on ``client.config`` but are not
    connected to request dispatch.

    Args:
        config: The client configuration.

    Returns:
        A new client.

    Example:
        ```pycon
        >>> from nimbus import ClientConfig, create
        >>> client = create(ClientConfig(base_url="https://api.example.com"))
        >>> client.base_url
        'https://api.example.com'

        ```
    """
    logger.debug(f"Creating nimbus client for {config.base_url}")
    return AsyncNimbusClient(config.base_url, config=config)
