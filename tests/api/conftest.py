"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from docstore.config import Settings
from docstore.main import create_docstore_app


@pytest.fixture
def app():
    """Falcon ASGI app wired to a fresh DocumentManager."""
    return create_docstore_app(Settings(_env_file=None))


@pytest.fixture
def client(app):
    """Falcon ASGI test client."""
    return TestClient(app)
