r"""Asynchronous HTTP client facade.

This module provides ``AsyncNimbusClient``, the public surface of nimbus:
one method per HTTP verb, a base address joined to every request path,
and one request and one response interceptor slot.
"""

from __future__ import annotations

__all__ = ["AsyncNimbusClient"]

from typing import TYPE_CHECKING, Any

from nimbus.models import Interceptors, RequestOptions
from nimbus.request_async import request_async
from nimbus.url import build_url

if TYPE_CHECKING:
    import httpx

    from nimbus.core.config import ClientConfig
    from nimbus.interceptors import RequestInterceptor, ResponseInterceptor
    from nimbus.models import Response


class AsyncNimbusClient:
    r"""Asynchronous HTTP client with a base address and interceptors.

    Each verb method returns the ``Response`` of a successful (2xx)
    request and raises a ``NimbusError`` otherwise. When a response
    interceptor is registered, the method returns the ``data`` of the
    intercepted response instead of the full response.

    The client holds at most one request interceptor and one response
    interceptor. Registering an interceptor replaces the previous one of
    the same kind. The slots are not synchronized: concurrent
    registration is a last-writer-wins race.

    Args:
        base_url: Optional base address joined to every request path.
            It cannot be changed after construction.
        client: Optional ``httpx.AsyncClient`` used to send every request.
            The caller keeps ownership and must close it. If ``None``, each
            request creates and closes its own httpx client.
        config: The configuration the client was created from, if any.

    Example:
        ```pycon
        >>> import asyncio
        >>> from nimbus import AsyncNimbusClient
        >>> async def main():  # doctest: +SKIP
        ...     client = AsyncNimbusClient("https://jsonplaceholder.typicode.com")
        ...     response = await client.get("/todos/1")
        ...     created = await client.post("/posts", {"title": "Sample Todo"})
        ...     return response.data, created.status
        ...
        >>> asyncio.run(main())  # doctest: +SKIP

        ```
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        client: httpx.AsyncClient | None = None,
        config: ClientConfig | None = None,
    ) -> None:
        self._base_url = base_url
        self._client = client
        self._config = config
        self._request_interceptor: RequestInterceptor | None = None
        self._response_interceptor: ResponseInterceptor | None = None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(base_url={self._base_url!r})"

    @property
    def base_url(self) -> str | None:
        return self._base_url

    @property
    def config(self) -> ClientConfig | None:
        return self._config

    @property
    def request_interceptor(self) -> RequestInterceptor | None:
        return self._request_interceptor

    @request_interceptor.setter
    def request_interceptor(self, interceptor: RequestInterceptor | None) -> None:
        self.set_request_interceptor(interceptor)

    @property
    def response_interceptor(self) -> ResponseInterceptor | None:
        return self._response_interceptor

    @response_interceptor.setter
    def response_interceptor(self, interceptor: ResponseInterceptor | None) -> None:
        self.set_response_interceptor(interceptor)

    def set_request_interceptor(self, interceptor: RequestInterceptor | None) -> None:
        """Register the request interceptor, replacing any previous one.

        Args:
            interceptor: A function (or coroutine function) receiving the
                built ``RequestOptions`` and returning the options to send.
                ``None`` removes the current interceptor.
        """
        self._request_interceptor = interceptor

    def set_response_interceptor(self, interceptor: ResponseInterceptor | None) -> None:
        """Register the response interceptor, replacing any previous one.

        Args:
            interceptor: A function (or coroutine function) receiving the
                ``Response`` and returning the transformed response.
                ``None`` removes the current interceptor.
        """
        self._response_interceptor = interceptor

    async def request(
        self,
        method: str,
        path: str,
        *,
        body: Any = None,
        options: RequestOptions | None = None,
        **kwargs: Any,
    ) -> Response | Any:
        r"""Send an HTTP request.

        Args:
            method: HTTP method (GET, POST, PUT, PATCH or DELETE).
            path: The request path, joined to the base address. An
                absolute URL can be passed when the client has no base
                address.
            body: Optional request body. Overrides ``options.body``.
            options: Optional request options.
            **kwargs: ``RequestOptions`` fields overriding ``options``
                (e.g., ``headers``, ``query_params``, ``timeout``).

        Returns:
            The ``Response``, or the ``data`` of the intercepted response
            when a response interceptor is in effect.

        Raises:
            NimbusError: If the request fails.
            ValueError: If the method or the timeout is invalid.
        """
        options = (options or RequestOptions()).merge(method=method, body=body, **kwargs)
        url = build_url(self._base_url, path, options.query_params)

        overrides = options.interceptors or Interceptors()
        request_interceptor = overrides.request or self._request_interceptor
        response_interceptor = overrides.response or self._response_interceptor

        response = await request_async(
            url,
            options,
            client=self._client,
            request_interceptor=request_interceptor,
            response_interceptor=response_interceptor,
        )
        if response_interceptor is not None:
            return response.data
        return response

    async def get(self, path: str, options: RequestOptions | None = None, **kwargs: Any) -> Response | Any:
        r"""Send an HTTP GET request.

        Args:
            path: The request path.
            options: Optional request options.
            **kwargs: Option overrides (see ``request``).

        Returns:
            The response (see ``request``).
        """
        return await self.request("GET", path, options=options, **kwargs)

    async def post(
        self, path: str, body: Any = None, options: RequestOptions | None = None, **kwargs: Any
    ) -> Response | Any:
        r"""Send an HTTP POST request.

        Args:
            path: The request path.
            body: Optional request body, serialized as JSON by default.
            options: Optional request options.
            **kwargs: Option overrides (see ``request``).

        Returns:
            The response (see ``request``).
        """
        return await self.request("POST", path, body=body, options=options, **kwargs)

    async def put(
        self, path: str, body: Any = None, options: RequestOptions | None = None, **kwargs: Any
    ) -> Response | Any:
        r"""Send an HTTP PUT request.

        Args:
            path: The request path.
            body: Optional request body, serialized as JSON by default.
            options: Optional request options.
            **kwargs: Option overrides (see ``request``).

        Returns:
            The response (see ``request``).
        """
        return await self.request("PUT", path, body=body, options=options, **kwargs)

    async def patch(
        self, path: str, body: Any = None, options: RequestOptions | None = None, **kwargs: Any
    ) -> Response | Any:
        r"""Send an HTTP PATCH request.

        Args:
            path: The request path.
            body: Optional request body, serialized as JSON by default.
            options: Optional request options.
            **kwargs: Option overrides (see ``request``).

        Returns:
            The response (see ``request``).
        """
        return await self.request("PATCH", path, body=body, options=options, **kwargs)

    async def delete(
        self, path: str, options: RequestOptions | None = None, **kwargs: Any
    ) -> Response | Any:
        r"""Send an HTTP DELETE request.

        Args:
            path: The request path.
            options: Optional request options.
            **kwargs: Option overrides (see ``request``).

        Returns:
            The response (see ``request``).
        """
        return await self.request("DELETE", path, options=options, **kwargs)
