r"""Data structures describing a request and its response.

``RequestOptions`` is what callers (and request interceptors) see and
modify before a request is sent. ``Response`` is what a successful request
returns.
"""

from __future__ import annotations

__all__ = ["ContentType", "Interceptors", "RequestOptions", "Response", "ResponseType"]

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable


class ResponseType(str, Enum):
    """Declared deserialization format of a response body.

    The tag may arrive as configuration data, so plain strings are
    accepted wherever a ``ResponseType`` is expected and unknown tags are
    only rejected when the body is decoded.
    """

    JSON = "json"
    TEXT = "text"
    XML = "xml"


class ContentType(str, Enum):
    """Declared serialization format of a request body."""

    JSON = "application/json"
    XML = "application/xml"
    TEXT = "text/plain"
    MULTIPART = "multipart/form-data"


@dataclass
class Interceptors:
    """Per-request interceptor overrides.

    Attributes:
        request: Replaces the client's request interceptor for one call.
        response: Replaces the client's response interceptor for one call.
    """

    request: Callable[[RequestOptions], RequestOptions | Awaitable[RequestOptions]] | None = None
    response: Callable[[Response], Response | Awaitable[Response]] | None = None


@dataclass
class RequestOptions:
    """Options for a single HTTP request.

    All fields except ``method`` are optional; an absent field means the
    default for the verb.

    Attributes:
        method: The HTTP method (GET, POST, PUT, PATCH or DELETE).
        headers: Request headers.
        query_params: Query parameters appended to the URL.
        body: Request body, serialized according to ``content_type``.
        response_type: Format used to decode the response body
            (``"json"``, ``"text"`` or ``"xml"``). Defaults to json.
        content_type: Format used to serialize the body. Defaults to
            ``application/json``.
        timeout: Overall deadline in seconds for the request.
        on_progress: Callback receiving the download progress as a
            percentage, called after every received chunk when the server
            declares a ``content-length``.
        interceptors: Per-request interceptor overrides.

    Example:
        ```pycon
        >>> from nimbus.models import RequestOptions
        >>> options = RequestOptions(method="POST", body={"name": "x"})
        >>> options.merge(timeout=2.0).timeout
        2.0
        >>> options.timeout is None
        True

        ```
    """

    method: str = "GET"
    headers: dict[str, str] = field(default_factory=dict)
    query_params: dict[str, Any] | None = None
    body: Any = None
    response_type: ResponseType | str | None = None
    content_type: ContentType | str | None = None
    timeout: float | None = None
    on_progress: Callable[[float], None] | None = None
    interceptors: Interceptors | None = None

    @property
    def has_body(self) -> bool:
        return self.body is not None

    def merge(self, **overrides: Any) -> RequestOptions:
        """Create a copy with the given fields replaced.

        Only non-None override values are applied. The header mapping is
        always copied so the result can be modified freely.

        Args:
            **overrides: Field values to replace.

        Returns:
            A new ``RequestOptions`` instance.
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        filtered_overrides.setdefault("headers", self.headers)
        filtered_overrides["headers"] = dict(filtered_overrides["headers"] or {})
        return replace(self, **filtered_overrides)


@dataclass(frozen=True)
class Response:
    """Response of a successful (2xx) request.

    Attributes:
        data: The decoded body. Its type depends on the response format.
        status: The HTTP status code.
        status_text: The reason phrase, if any.
        headers: Response headers. Header names are lower case and a
            header received several times maps to the list of its values.
    """

    data: Any
    status: int
    status_text: str | None = None
    headers: dict[str, str | list[str]] = field(default_factory=dict)
