r"""Download progress reporting."""

from __future__ import annotations

__all__ = ["compute_progress", "report_progress"]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

    import httpx


def compute_progress(received: int, content_length: str | None) -> float | None:
    """Compute the download progress as a percentage.

    Args:
        received: Number of bytes received so far.
        content_length: Value of the ``content-length`` header, if any.

    Returns:
        ``received / content_length * 100``, or ``None`` if the length is
        unknown, not a number or zero.

    Example:
        ```pycon
        >>> from nimbus.utils.progress import compute_progress
        >>> compute_progress(50, "200")
        25.0
        >>> compute_progress(50, None) is None
        True

        ```
    """
    if content_length is None:
        return None
    try:
        total = int(content_length)
    except ValueError:
        return None
    if total <= 0:
        return None
    return received / total * 100


def report_progress(
    on_progress: Callable[[float], None] | None,
    response: httpx.Response,
    received: int,
) -> None:
    """Invoke the progress callback if provided and the length is known.

    Args:
        on_progress: Optional callback receiving the progress percentage.
        response: The streamed response, used for its ``content-length``
            header.
        received: Number of body bytes received so far.
    """
    if on_progress is None:
        return
    progress = compute_progress(received, response.headers.get("content-length"))
    if progress is not None:
        on_progress(progress)
