r"""Configuration defaults and parameter validation shared by the
client and the request dispatcher."""

from __future__ import annotations

__all__ = [
    "DEFAULT_CONTENT_TYPE",
    "DEFAULT_RESPONSE_TYPE",
    "DEFAULT_TIMEOUT",
    "HTTP_METHODS",
    "ClientConfig",
    "validate_method",
    "validate_timeout",
]

from nimbus.core.config import ClientConfig
from nimbus.core.constants import (
    DEFAULT_CONTENT_TYPE,
    DEFAULT_RESPONSE_TYPE,
    DEFAULT_TIMEOUT,
    HTTP_METHODS,
)
from nimbus.core.validation import validate_method, validate_timeout
