from __future__ import annotations

from urllib.parse import parse_qsl, urlsplit

import httpx
import pytest

from nimbus import InvalidURLError, NimbusError, build_url
from nimbus.url import Transport, select_transport, validate_url

BASE_URL = "https://api.example.com"


###############################
#     Tests for build_url     #
###############################


@pytest.mark.parametrize(
    ("base_url", "path", "expected"),
    [
        ("https://api.example.com", "todos/1", "https://api.example.com/todos/1"),
        ("https://api.example.com", "/todos/1", "https://api.example.com/todos/1"),
        ("https://api.example.com/", "todos/1", "https://api.example.com/todos/1"),
        ("https://api.example.com/", "/todos/1", "https://api.example.com/todos/1"),
        ("https://api.example.com/v1", "todos", "https://api.example.com/v1/todos"),
        ("https://api.example.com", "", "https://api.example.com"),
    ],
)
def test_build_url_joins_with_one_slash(base_url: str, path: str, expected: str) -> None:
    assert build_url(base_url, path) == expected


@pytest.mark.parametrize("base_url", [None, ""])
def test_build_url_without_base_url_keeps_path(base_url: str | None) -> None:
    assert build_url(base_url, "https://other.example.com/a") == "https://other.example.com/a"


def test_build_url_query_params() -> None:
    assert (
        build_url(BASE_URL, "/todos", {"userId": "1", "completed": "false"})
        == "https://api.example.com/todos?userId=1&completed=false"
    )


def test_build_url_query_params_are_percent_encoded() -> None:
    url = build_url(BASE_URL, "/search", {"q": "a b&c=d", "ключ": "значение/?"})
    assert url == (
        "https://api.example.com/search?q=a%20b%26c%3Dd"
        "&%D0%BA%D0%BB%D1%8E%D1%87=%D0%B7%D0%BD%D0%B0%D1%87%D0%B5%D0%BD%D0%B8%D0%B5%2F%3F"
    )


def test_build_url_query_values_are_converted_to_str() -> None:
    assert build_url(BASE_URL, "/todos", {"page": 2, "done": True}) == (
        "https://api.example.com/todos?page=2&done=True"
    )


@pytest.mark.parametrize("query_params", [None, {}])
def test_build_url_without_query_params(query_params: dict[str, str] | None) -> None:
    assert build_url(BASE_URL, "/todos", query_params) == "https://api.example.com/todos"


@pytest.mark.parametrize(
    "query_params",
    [
        {"a": "1"},
        {"name": "John Doe", "email": "johndoe@example.com"},
        {"q": "50% off + more", "tag": "c++", "path": "/a/b?c#d"},
        {"emoji": "☁️", "empty": ""},
    ],
)
def test_build_url_query_round_trip(query_params: dict[str, str]) -> None:
    url = build_url(BASE_URL, "/todos", query_params)
    assert dict(parse_qsl(urlsplit(url).query, keep_blank_values=True)) == query_params


##################################
#     Tests for validate_url     #
##################################


@pytest.mark.parametrize(
    "url", ["https://api.example.com/todos/1", "http://localhost:8000", "http://127.0.0.1/a?b=c"]
)
def test_validate_url_valid(url: str) -> None:
    assert isinstance(validate_url(url), httpx.URL)


@pytest.mark.parametrize("url", ["", "/todos/1", "todos/1", "not a url", "http://", "https://"])
def test_validate_url_invalid(url: str) -> None:
    with pytest.raises(InvalidURLError, match=r"Invalid URL provided"):
        validate_url(url)


def test_validate_url_invalid_is_nimbus_error() -> None:
    with pytest.raises(NimbusError) as exc_info:
        validate_url("/todos/1")
    assert exc_info.value.status is None


######################################
#     Tests for select_transport     #
######################################


@pytest.mark.parametrize(
    ("url", "transport"),
    [
        ("https://api.example.com", Transport.TLS),
        ("HTTPS://api.example.com", Transport.TLS),
        ("http://api.example.com", Transport.PLAIN),
        ("ws://api.example.com", Transport.PLAIN),
    ],
)
def test_select_transport(url: str, transport: Transport) -> None:
    assert select_transport(url) == transport


def test_select_transport_parsed_url() -> None:
    assert select_transport(httpx.URL("https://api.example.com")) == Transport.TLS
