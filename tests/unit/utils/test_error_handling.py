from __future__ import annotations

import asyncio

import httpx
import pytest

from nimbus import RequestTimeoutError, TransportError
from nimbus.utils import handle_request_error, handle_timeout_exception

TEST_URL = "https://api.example.com/data"


##############################################
#     Tests for handle_timeout_exception     #
##############################################


@pytest.mark.parametrize(
    "exc", [asyncio.TimeoutError(), httpx.ReadTimeout("read timed out"), httpx.ConnectTimeout("")]
)
def test_handle_timeout_exception(exc: Exception) -> None:
    with pytest.raises(RequestTimeoutError, match=r"Request timed out") as exc_info:
        handle_timeout_exception(exc, url=TEST_URL, method="GET")
    assert exc_info.value.__cause__ is exc
    assert exc_info.value.status is None


##########################################
#     Tests for handle_request_error     #
##########################################


def test_handle_request_error() -> None:
    exc = httpx.ConnectError("Connection refused")
    with pytest.raises(
        TransportError,
        match=r"GET request to https://api.example.com/data failed: ConnectError: Connection refused",
    ) as exc_info:
        handle_request_error(exc, url=TEST_URL, method="GET")
    assert exc_info.value.__cause__ is exc


@pytest.mark.parametrize(
    "exc",
    [
        httpx.ConnectError("Name or service not known"),
        httpx.ReadError("Connection reset by peer"),
        httpx.WriteError("Broken pipe"),
        httpx.RemoteProtocolError("Server disconnected"),
        httpx.UnsupportedProtocol("Request URL has an unsupported protocol 'ftp://'."),
    ],
)
def test_handle_request_error_wraps_description(exc: httpx.RequestError) -> None:
    with pytest.raises(TransportError) as exc_info:
        handle_request_error(exc, url=TEST_URL, method="POST")
    assert str(exc) in str(exc_info.value)
    assert type(exc).__name__ in str(exc_info.value)
