"""
Pytest fixtures for the Sales Intel Hub tests.

Provides a module-scoped TestClient over a freshly created app.  The app has
no database or external services, so every fixture is cheap.
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from fastapi.testclient import TestClient  # noqa: E402

from api.app import create_app  # noqa: E402


@pytest.fixture(scope="module")
def app_client():
    """TestClient over a new app instance."""
    return TestClient(create_app())
