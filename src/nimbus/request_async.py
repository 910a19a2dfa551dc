r"""Asynchronous dispatch of a single HTTP request.

``request_async`` owns the whole lifecycle of one request: it builds the
outgoing options, runs the request interceptor, validates the URL and
selects the transport, streams the response body while reporting
progress, classifies the outcome by status code, decodes the body and
runs the response interceptor.

Every call gets its own body buffer and deadline, so concurrent calls
share no mutable state.
"""

from __future__ import annotations

__all__ = ["build_options", "request_async"]

import asyncio
import logging
from typing import TYPE_CHECKING

import httpx

from nimbus.core.constants import DEFAULT_TIMEOUT
from nimbus.core.validation import validate_method, validate_timeout
from nimbus.decoding import decode_body, decode_text, encode_body, resolve_content_type
from nimbus.interceptors import apply_request_interceptor, apply_response_interceptor
from nimbus.models import ContentType, RequestOptions, Response
from nimbus.url import select_transport, validate_url
from nimbus.utils import (
    collect_headers,
    handle_request_error,
    handle_status,
    handle_timeout_exception,
    report_progress,
)

if TYPE_CHECKING:
    from nimbus.interceptors import RequestInterceptor, ResponseInterceptor

logger: logging.Logger = logging.getLogger(__name__)


def build_options(options: RequestOptions) -> RequestOptions:
    """Build the outgoing options of one request.

    The options are copied, so the caller's instance is never modified.
    When a body is present and no ``Content-Type`` header is set, the
    header defaults to the declared content type or ``application/json``.
    For multipart bodies the header is left to httpx, which adds the
    boundary.

    Args:
        options: The options given by the caller.

    Returns:
        A new ``RequestOptions`` instance.

    Raises:
        ValueError: If the method or the timeout is invalid.

    Example:
        ```pycon
        >>> from nimbus.models import RequestOptions
        >>> from nimbus.request_async import build_options
        >>> build_options(RequestOptions(method="post", body={"a": 1})).headers
        {'Content-Type': 'application/json'}

        ```
    """
    built = options.merge(method=options.method.upper())
    validate_method(built.method)
    validate_timeout(built.timeout)
    if built.has_body and not any(name.lower() == "content-type" for name in built.headers):
        media_type = resolve_content_type(built.content_type)
        if media_type != ContentType.MULTIPART.value:
            built.headers["Content-Type"] = media_type
    return built


async def request_async(
    url: str,
    options: RequestOptions,
    *,
    client: httpx.AsyncClient | None = None,
    request_interceptor: RequestInterceptor | None = None,
    response_interceptor: ResponseInterceptor | None = None,
) -> Response:
    """Send an HTTP request and return its decoded response.

    Args:
        url: The absolute URL, query string included.
        options: The request options.
        client: An optional ``httpx.AsyncClient`` used to send the request.
            It is not closed. If ``None``, a new client is created for
            this call and closed afterwards.
        request_interceptor: Optional interceptor receiving the built
            options. Its result replaces them.
        response_interceptor: Optional interceptor receiving the
            response before it is returned.

    Returns:
        The response, as returned by the response interceptor if any.

    Raises:
        InvalidURLError: If the URL is not a well-formed absolute URL.
        ClientStatusError: If the server answers with a 4xx status.
        ServerStatusError: If the server answers with a 5xx status.
        UnexpectedStatusError: If the server answers with any other
            non-2xx status.
        RequestTimeoutError: If ``options.timeout`` elapses before the
            response is complete, or httpx times out.
        TransportError: If the connection fails.
        DecodeError: If the body cannot be decoded.
        ValueError: If the method or the timeout is invalid.

    Example:
        ```pycon
        >>> import asyncio
        >>> from nimbus.models import RequestOptions
        >>> from nimbus.request_async import request_async
        >>> response = asyncio.run(
        ...     request_async("https://jsonplaceholder.typicode.com/todos/1", RequestOptions())
        ... )  # doctest: +SKIP
        >>> response.status  # doctest: +SKIP
        200

        ```
    """
    options = await apply_request_interceptor(request_interceptor, build_options(options))
    method = options.method.upper()
    validate_method(method)

    parsed_url = validate_url(url)
    transport = select_transport(parsed_url)
    logger.debug(f"Sending {method} request to {url} over {transport.value} transport")

    exchange = _exchange(url, method, options, client)
    try:
        if options.timeout is None:
            response = await exchange
        else:
            response = await asyncio.wait_for(exchange, timeout=options.timeout)
    except asyncio.TimeoutError as exc:
        handle_timeout_exception(exc, url=url, method=method)
    except httpx.TimeoutException as exc:
        handle_timeout_exception(exc, url=url, method=method)
    except httpx.RequestError as exc:
        handle_request_error(exc, url=url, method=method)

    return await apply_response_interceptor(response_interceptor, response)


async def _exchange(
    url: str,
    method: str,
    options: RequestOptions,
    client: httpx.AsyncClient | None,
) -> Response:
    """Send the request, accumulate the body and build the response.

    Cancelling this coroutine (when the deadline elapses) exits the
    stream context, which closes the connection.
    """
    body_kwargs = encode_body(options.body, options.content_type) if options.has_body else {}

    owns_client = client is None
    client = client or httpx.AsyncClient(timeout=DEFAULT_TIMEOUT)
    try:
        async with client.stream(method, url, headers=options.headers, **body_kwargs) as response:
            buffer = bytearray()
            async for chunk in response.aiter_bytes():
                buffer.extend(chunk)
                # Raw bytes match content-length even for compressed bodies
                received = response.num_bytes_downloaded or len(buffer)
                report_progress(options.on_progress, response, received)

            headers = collect_headers(response)
            logger.debug(
                f"{method} request to {url} completed with status {response.status_code} "
                f"({len(buffer)} bytes)"
            )
            handle_status(response, url=url, method=method, headers=headers)
            text = decode_text(bytes(buffer), response.encoding, options.response_type)
    finally:
        if owns_client:
            await client.aclose()

    return Response(
        data=decode_body(text, options.response_type),
        status=response.status_code,
        status_text=response.reason_phrase or None,
        headers=headers,
    )
