from __future__ import annotations

from typing import TYPE_CHECKING, Any
from unittest.mock import Mock

import pytest

from nimbus import factory

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def todo() -> dict[str, Any]:
    """Return the JSON body served for ``/todos/1``."""
    return {"userId": 1, "id": 1, "title": "x", "completed": False}


@pytest.fixture
def mock_progress() -> Mock:
    """Create a mock progress callback for testing."""
    return Mock()


@pytest.fixture
def reset_shared_client() -> Generator[None, None, None]:
    """Reset the process-wide shared client before and after a test."""
    factory._shared_client = None
    yield
    factory._shared_client = None
