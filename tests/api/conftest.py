"""
Pytest configuration for API integration tests
"""

import pytest
from fastapi.testclient import TestClient


@pytest.fixture(scope="function")
def client():
    """
    Create a test client with properly initialized app state.
    Each test gets a fresh client to avoid state contamination.
    """
    from core.enums import EdgePolicy
    from main import app
    from services.image_service import ImageService

    app.state.image_service = ImageService(edge_policy=EdgePolicy.REFLECT, max_upload_mb=5)
    app.state.config = {
        "environment": "test",
        "image": {"tail_window_size": 1024},
    }

    # Create test client (no context manager so the lifespan is not run)
    yield TestClient(app, raise_server_exceptions=False)
