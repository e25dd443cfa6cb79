"""API test fixtures."""

import pytest
from fastapi.testclient import TestClient

from event_hub_api.app.main import app


@pytest.fixture
def client():
    # Not used as a context manager: the startup hook (seeding) stays off
    # and each test controls the store contents itself.
    return TestClient(app)
