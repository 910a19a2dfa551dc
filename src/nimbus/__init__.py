r"""nimbus - Configurable asynchronous HTTP request client.

This package provides a small asynchronous HTTP client built on top of
httpx. It joins a base address, a path and query parameters into the
request URL, sends the request over plaintext or TLS transport, reports
download progress, applies pluggable request and response interceptors,
classifies failures by status-code range, and decodes the response body
according to a declared format.

Key Features:
    - One method per HTTP verb (GET, POST, PUT, PATCH, DELETE)
    - JSON, text and XML response decoding
    - JSON, text, XML and multipart request bodies
    - Request and response interceptors (sync or async)
    - Download progress callback
    - Per-request timeout cancelling the in-flight connection
    - Structured ``NimbusError`` hierarchy for every failure

Example:
    ```pycon
    >>> import asyncio
    >>> from nimbus import AsyncNimbusClient, NimbusError
    >>> async def main():  # doctest: +SKIP
    ...     client = AsyncNimbusClient("https://jsonplaceholder.typicode.com")
    ...     try:
    ...         response = await client.get("/todos/1", timeout=5.0)
    ...     except NimbusError as error:
    ...         print(error.status, error)
    ...     else:
    ...         print(response.status, response.data)
    ...
    >>> asyncio.run(main())  # doctest: +SKIP

    ```
"""

from __future__ import annotations

__all__ = [
    "AsyncNimbusClient",
    "ClientConfig",
    "ClientStatusError",
    "ContentType",
    "DecodeError",
    "Interceptors",
    "InvalidURLError",
    "NimbusError",
    "RequestOptions",
    "RequestTimeoutError",
    "Response",
    "ResponseType",
    "ServerStatusError",
    "TransportError",
    "UnexpectedStatusError",
    "__version__",
    "build_url",
    "create",
    "get_client",
    "request_async",
]

from importlib.metadata import PackageNotFoundError, version

from nimbus.client_async import AsyncNimbusClient
from nimbus.core.config import ClientConfig
from nimbus.exceptions import (
    ClientStatusError,
    DecodeError,
    InvalidURLError,
    NimbusError,
    RequestTimeoutError,
    ServerStatusError,
    TransportError,
    UnexpectedStatusError,
)
from nimbus.factory import create, get_client
from nimbus.models import ContentType, Interceptors, RequestOptions, Response, ResponseType
from nimbus.request_async import request_async
from nimbus.url import build_url

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
