r"""Default values shared by the client, the dispatcher and the
configuration layer."""

from __future__ import annotations

__all__ = ["DEFAULT_CONTENT_TYPE", "DEFAULT_RESPONSE_TYPE", "DEFAULT_TIMEOUT", "HTTP_METHODS"]

# Timeout in seconds of the httpx client created for a call when the
# caller does not inject one. A per-request ``timeout`` option is an
# overall deadline on top of it.
DEFAULT_TIMEOUT = 10.0

# Format used to decode a response body when none is declared
DEFAULT_RESPONSE_TYPE = "json"

# Content type used to serialize a request body when none is declared
DEFAULT_CONTENT_TYPE = "application/json"

# HTTP methods exposed by the client facade
HTTP_METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE")
