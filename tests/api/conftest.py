"""Fixtures for API tests."""

import pytest

from graphmap.config import Settings
from graphmap.infrastructure.mapping.mapping_context import MappingContext
from graphmap.main import create_graphmap_app


@pytest.fixture
def app(mapped_context: MappingContext):
    """Falcon ASGI app over the sample model."""
    return create_graphmap_app(Settings(), context=mapped_context)


@pytest.fixture
def client(app):
    """Falcon ASGI test client."""
    from falcon.testing import TestClient
    return TestClient(app)
