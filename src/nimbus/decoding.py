r"""Serialization of request bodies and decoding of response bodies.

Example:
    ```pycon
    >>> from nimbus.decoding import decode_body, encode_body
    >>> decode_body('{"id": 1}')
    {'id': 1}
    >>> decode_body("plain", "text")
    'plain'
    >>> encode_body({"id": 1}, "application/json")
    {'content': '{"id": 1}'}

    ```
"""

from __future__ import annotations

__all__ = ["decode_body", "decode_text", "encode_body", "resolve_content_type"]

import json
import logging
from collections.abc import Mapping
from typing import Any
from xml.etree import ElementTree

from nimbus.core.constants import DEFAULT_CONTENT_TYPE, DEFAULT_RESPONSE_TYPE
from nimbus.exceptions import DecodeError
from nimbus.models import ContentType, ResponseType

logger: logging.Logger = logging.getLogger(__name__)


def decode_body(text: str, response_type: ResponseType | str | None = None) -> Any:
    """Decode a response body according to its declared format.

    Args:
        text: The accumulated response body.
        response_type: The response format tag. ``None`` means json.

    Returns:
        The parsed JSON value for ``"json"``, the text unchanged for
        ``"text"``, and the root ``Element`` for ``"xml"``. A zero-length
        JSON body (e.g. a 204 answer) decodes to ``None``, while a
        whitespace-only one is malformed.

    Raises:
        DecodeError: If the tag is not supported or the body is malformed.
    """
    tag = DEFAULT_RESPONSE_TYPE if response_type is None else response_type
    try:
        kind = ResponseType(tag)
    except ValueError:
        msg = f"Unsupported response type: {tag}"
        raise DecodeError(msg) from None

    if kind is ResponseType.JSON:
        if not text:
            return None
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            logger.debug(f"Failed to parse JSON response body: {exc}")
            msg = f"Failed to parse JSON response: {exc}"
            raise DecodeError(msg, response=text) from exc
    if kind is ResponseType.TEXT:
        return text
    try:
        return ElementTree.fromstring(text)  # noqa: S314
    except ElementTree.ParseError as exc:
        logger.debug(f"Failed to parse XML response body: {exc}")
        msg = f"Failed to parse XML response: {exc}"
        raise DecodeError(msg, response=text) from exc


def decode_text(
    raw: bytes, encoding: str | None = None, response_type: ResponseType | str | None = None
) -> str:
    """Decode the raw response body into text.

    Text responses tolerate invalid bytes, which are replaced. Every other
    format is decoded strictly so a body that does not match its charset
    is never parsed from altered text.

    Args:
        raw: The accumulated response body.
        encoding: The response charset. ``None`` means UTF-8.
        response_type: The response format tag. ``None`` means json.

    Returns:
        The decoded text.

    Raises:
        DecodeError: If the body is not valid in its charset and the
            format is not text.

    Example:
        ```pycon
        >>> from nimbus.decoding import decode_text
        >>> decode_text("café".encode("latin-1"), "latin-1")
        'café'
        >>> decode_text(b"caf\\xe9", "utf-8", "text")
        'caf�'

        ```
    """
    encoding = encoding or "utf-8"
    if response_type == ResponseType.TEXT:
        return raw.decode(encoding, errors="replace")
    try:
        return raw.decode(encoding)
    except UnicodeDecodeError as exc:
        logger.debug(f"Failed to decode response body as {encoding}: {exc}")
        msg = f"Failed to decode response body as {encoding}: {exc}"
        raise DecodeError(msg) from exc


def encode_body(body: Any, content_type: ContentType | str | None = None) -> dict[str, Any]:
    """Serialize a request body for the declared content type.

    Args:
        body: The request body.
        content_type: The content type. ``None`` means
            ``application/json``. Unknown content types fall back to
            ``str(body)``.

    Returns:
        The keyword arguments carrying the body for
        ``httpx.AsyncClient.stream``: ``content`` for every format,
        or ``files`` for multipart form data. Bytes, file-like and
        ``(filename, content)`` values become file parts, every other
        value a plain field converted with ``str``.

    Raises:
        TypeError: If a multipart body is not a mapping, or if a JSON body
            is not serializable.
    """
    media_type = resolve_content_type(content_type)

    if media_type == ContentType.MULTIPART.value:
        if not isinstance(body, Mapping):
            msg = f"multipart/form-data body must be a mapping, got {type(body).__name__}"
            raise TypeError(msg)
        # httpx only builds a multipart body from ``files``, so plain fields
        # go there too, as parts without a filename
        files: dict[str, Any] = {}
        for key, value in body.items():
            if isinstance(value, (bytes, bytearray)):
                files[key] = bytes(value)
            elif isinstance(value, tuple) or hasattr(value, "read"):
                files[key] = value
            else:
                files[key] = (None, str(value))
        return {"files": files}

    if isinstance(body, (bytes, bytearray)):
        return {"content": bytes(body)}
    if media_type == ContentType.JSON.value:
        return {"content": json.dumps(body)}
    if media_type == ContentType.XML.value and isinstance(body, ElementTree.Element):
        return {"content": ElementTree.tostring(body, encoding="unicode")}
    return {"content": str(body)}


def resolve_content_type(content_type: ContentType | str | None) -> str:
    """Return the media type string for a declared content type.

    Example:
        ```pycon
        >>> from nimbus.decoding import resolve_content_type
        >>> from nimbus.models import ContentType
        >>> resolve_content_type(None)
        'application/json'
        >>> resolve_content_type(ContentType.XML)
        'application/xml'

        ```
    """
    if content_type is None:
        return DEFAULT_CONTENT_TYPE
    if isinstance(content_type, ContentType):
        return content_type.value
    return content_type
