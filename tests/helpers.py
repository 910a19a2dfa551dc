r"""Shared test helpers for the dispatcher and client tests.

The helpers build ``httpx.AsyncClient`` instances backed by
``httpx.MockTransport`` so requests go through the real httpx pipeline
without opening sockets.
"""

from __future__ import annotations

__all__ = [
    "BASE_URL",
    "TEST_URL",
    "ChunkedStream",
    "RecordingHandler",
    "create_mock_client",
]

import asyncio
from typing import TYPE_CHECKING, Any

import httpx

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Callable

BASE_URL = "https://api.example.com"
TEST_URL = f"{BASE_URL}/todos/1"


class ChunkedStream(httpx.AsyncByteStream):
    """Response body stream yielding predefined chunks.

    Args:
        chunks: The chunks to yield, in order.
        delay: Optional delay in seconds before each chunk.
    """

    def __init__(self, chunks: list[bytes], delay: float = 0.0) -> None:
        self._chunks = chunks
        self._delay = delay
        self.closed = False

    async def __aiter__(self) -> AsyncIterator[bytes]:
        for chunk in self._chunks:
            if self._delay:
                await asyncio.sleep(self._delay)
            yield chunk

    async def aclose(self) -> None:
        self.closed = True


class RecordingHandler:
    """MockTransport handler recording every request it receives.

    Args:
        response_factory: Function building the response for a request.
            Defaults to an empty 200 JSON object.
    """

    def __init__(self, response_factory: Callable[[httpx.Request], httpx.Response] | None = None) -> None:
        self._response_factory = response_factory or (lambda _request: httpx.Response(200, json={}))
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        return self._response_factory(request)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


def create_mock_client(handler: Callable[[httpx.Request], Any]) -> httpx.AsyncClient:
    """Create an ``httpx.AsyncClient`` served by ``handler``."""
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))
