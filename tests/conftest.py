# tests/conftest.py

"""
Pytest configuration and shared fixtures for testing.
"""

import pytest
from fastapi.testclient import TestClient
from unittest.mock import Mock
from typing import Generator

from main import create_app
from core.config import settings
from core.rate_limiter import reset_rate_limits
from dependencies.auth import get_current_admin
from dependencies.services import get_storage, get_store
from models.auth import CurrentAdmin

from tests.fakes import FakeResourceStorage, InMemoryContentStore


@pytest.fixture(autouse=True)
def supabase_settings(monkeypatch):
    """Credentials so startup config validation passes; the client itself is never built."""
    monkeypatch.setattr(settings, "SUPABASE_URL", "https://test.supabase.co")
    monkeypatch.setattr(settings, "SUPABASE_SERVICE_ROLE_KEY", "test-service-role-key")


@pytest.fixture
def store() -> InMemoryContentStore:
    """Empty in-memory content store."""
    return InMemoryContentStore()


@pytest.fixture
def storage() -> FakeResourceStorage:
    return FakeResourceStorage()


@pytest.fixture(scope="function")
def app(store, storage):
    """Test FastAPI application wired to the in-memory collaborators."""
    app = create_app(run_scheduler=False)
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_storage] = lambda: storage
    return app


@pytest.fixture
def mock_current_admin():
    """Create a mock current admin for testing."""
    return CurrentAdmin(
        id="admin-user-id",
        email="admin@example.com",
        access_token="test-token",
    )


@pytest.fixture(scope="function")
def client(app) -> Generator[TestClient, None, None]:
    """Unauthenticated test client."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(scope="function")
def admin_client(app, mock_current_admin) -> Generator[TestClient, None, None]:
    """Test client whose requests are authenticated as an admin."""
    app.dependency_overrides[get_current_admin] = lambda: mock_current_admin
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def mock_supabase_client():
    """Create a mock Supabase client."""
    mock_client = Mock()
    mock_table = Mock()
    mock_client.table.return_value = mock_table
    return mock_client


@pytest.fixture(autouse=True)
def reset_limits():
    """Reset the login limiter before each test."""
    reset_rate_limits()
    yield
    reset_rate_limits()
