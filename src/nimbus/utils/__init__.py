r"""Utility functions for HTTP request handling.

This package provides helpers for classifying responses by status code,
converting transport exceptions into nimbus errors, and reporting
download progress.
"""

from __future__ import annotations

__all__ = [
    "collect_headers",
    "compute_progress",
    "handle_request_error",
    "handle_status",
    "handle_timeout_exception",
    "report_progress",
]

from nimbus.utils.exceptions import handle_request_error, handle_timeout_exception
from nimbus.utils.progress import compute_progress, report_progress
from nimbus.utils.response import collect_headers, handle_status
