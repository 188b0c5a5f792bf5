"""Pytest configuration and fixtures."""

import json
from collections.abc import Callable
from pathlib import Path
from unittest.mock import MagicMock

import pytest


def _response(status_code: int = 200, text: str = "{}") -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    return response


@pytest.fixture
def make_response() -> Callable[..., MagicMock]:
    """Return a factory for mock requests.Response objects."""
    return _response


@pytest.fixture
def core_props(tmp_path: Path) -> Path:
    """Create a coreProps.json pointing at a local daemon."""
    path = tmp_path / "coreProps.json"
    path.write_text(json.dumps({"address": "127.0.0.1:5678"}))
    return path


@pytest.fixture
def mock_session() -> MagicMock:
    """Create a mock requests.Session answering 200 to every POST."""
    session = MagicMock()
    session.post = MagicMock(return_value=_response())
    return session
