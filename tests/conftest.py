"""
Pytest fixtures for Baby Care Tracker tests.
"""
import sys
from pathlib import Path

import pytest
from dotenv import load_dotenv
from fastapi.testclient import TestClient

# Ensure the project root and scripts/ are importable without installation.
ROOT = Path(__file__).resolve().parent.parent
for path in (ROOT, ROOT / "scripts"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

# Load environment variables
load_dotenv()

from server.babycare_api.config import Settings, get_settings  # noqa: E402
from server.babycare_api.dependencies import get_storage  # noqa: E402
from server.babycare_api.main import app  # noqa: E402
from server.babycare_api.store import BabyCareStorage  # noqa: E402


@pytest.fixture
def settings():
    """Default settings, independent of the process environment."""
    return Settings(_env_file=None)


@pytest.fixture
def store(settings):
    """A fresh, empty record store seeded with the default caregiver."""
    return BabyCareStorage(settings)


@pytest.fixture
def client(store):
    """Test client whose routes read and write the ``store`` fixture."""
    app.dependency_overrides[get_storage] = lambda: store
    app.dependency_overrides[get_settings] = lambda: store.settings
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_feeding(client):
    """Factory that POSTs a feeding and returns the created JSON record."""

    def _make(datetime_str: str, type_: str = "breast", **fields) -> dict:
        response = client.post("/api/feedings", json={"datetime": datetime_str, "type": type_, **fields})
        assert response.status_code == 200, response.text
        return response.json()

    return _make
