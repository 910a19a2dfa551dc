r"""Request and response interceptors.

An interceptor is a caller-supplied function that transforms the
outgoing ``RequestOptions`` or the incoming ``Response`` before the client
returns control. It may be a plain function or a coroutine function.

A client holds at most one interceptor of each kind: registering a new
one replaces the previous one, interceptors are never chained. The slots
are plain attributes without synchronization, so concurrent registration
is a last-writer-wins race.
"""

from __future__ import annotations

__all__ = [
    "RequestInterceptor",
    "ResponseInterceptor",
    "apply_request_interceptor",
    "apply_response_interceptor",
]

import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import Union

from nimbus.models import RequestOptions, Response

logger: logging.Logger = logging.getLogger(__name__)

RequestInterceptor = Callable[[RequestOptions], Union[RequestOptions, Awaitable[RequestOptions]]]
ResponseInterceptor = Callable[[Response], Union[Response, Awaitable[Response]]]


async def apply_request_interceptor(
    interceptor: RequestInterceptor | None, options: RequestOptions
) -> RequestOptions:
    """Run a request interceptor on the built options.

    Args:
        interceptor: The interceptor, or ``None``.
        options: The fully built request options.

    Returns:
        The options returned by the interceptor, which replace the built
        options, or ``options`` unchanged if there is no interceptor.

    Raises:
        TypeError: If the interceptor does not return ``RequestOptions``.
    """
    if interceptor is None:
        return options
    result = interceptor(options)
    if inspect.isawaitable(result):
        result = await result
    if not isinstance(result, RequestOptions):
        msg = f"request interceptor must return RequestOptions, got {type(result).__name__}"
        raise TypeError(msg)
    logger.debug(f"Request interceptor {getattr(interceptor, '__name__', interceptor)!r} applied")
    return result


async def apply_response_interceptor(
    interceptor: ResponseInterceptor | None, response: Response
) -> Response:
    """Run a response interceptor on a successful response.

    Args:
        interceptor: The interceptor, or ``None``.
        response: The response built from the server's answer.

    Returns:
        The response returned by the interceptor, or ``response``
        unchanged if there is no interceptor.

    Raises:
        TypeError: If the interceptor does not return a ``Response``.
    """
    if interceptor is None:
        return response
    result = interceptor(response)
    if inspect.isawaitable(result):
        result = await result
    if not isinstance(result, Response):
        msg = f"response interceptor must return Response, got {type(result).__name__}"
        raise TypeError(msg)
    logger.debug(f"Response interceptor {getattr(interceptor, '__name__', interceptor)!r} applied")
    return result
