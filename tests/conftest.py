"""Shared test fixtures and configuration."""
import pytest
import os
from pathlib import Path
from fastapi.testclient import TestClient

# Set test environment variables before importing app
os.environ.setdefault("DASHBOARD_PASSWORD", "testpass123")
os.environ.setdefault("RESTAURANT_NAME", "Test Restaurant")

from chef_menu.main import app
from chef_menu.core.config import Settings
from chef_menu.core.dependencies import get_menu_catalog
from chef_menu.services.catalog.catalog import MenuCatalog


@pytest.fixture
def test_settings():
    """Override settings for testing."""
    return Settings(
        dashboard_password="testpass123",
        restaurant_name="Test Restaurant",
        session_ttl_hours=24,
    )


@pytest.fixture
def test_menu_path():
    """Return path to test menu YAML file."""
    return Path(__file__).parent / "fixtures" / "test_menu.yaml"


@pytest.fixture
def catalog():
    """Create an empty catalog."""
    return MenuCatalog()


@pytest.fixture
def sample_catalog(catalog):
    """Catalog with two dishes per course, in a mixed insertion order."""
    catalog.add("Soup", "Hot soup", "starter", "45")
    catalog.add("Steak", "Grilled sirloin", "main", "100")
    catalog.add("Cake", "Chocolate cake", "dessert", "30")
    catalog.add("Salad", "Garden salad", "starter", "40")
    catalog.add("Fish", "Line fish", "main", "150")
    catalog.add("Tart", "Lemon tart", "dessert", "35.5")
    return catalog


@pytest.fixture
def override_get_menu_catalog(catalog):
    """Override get_menu_catalog dependency with the test catalog."""
    def _override_get_menu_catalog():
        return catalog
    return _override_get_menu_catalog


@pytest.fixture
def test_client(override_get_menu_catalog, test_settings, monkeypatch):
    """Create FastAPI test client with overrides."""
    app.dependency_overrides[get_menu_catalog] = override_get_menu_catalog

    # Override settings in modules that use it
    monkeypatch.setattr("chef_menu.core.config.settings", test_settings)
    monkeypatch.setattr("chef_menu.api.auth.settings", test_settings)
    monkeypatch.setattr("chef_menu.api.guest.settings", test_settings)

    client = TestClient(app)

    yield client

    app.dependency_overrides.clear()


@pytest.fixture
def authenticated_client(test_client, test_settings, clean_auth_sessions):
    """Create test client with valid chef session cookie."""
    response = test_client.post(
        "/api/auth/login",
        json={"password": test_settings.dashboard_password}
    )
    assert response.status_code == 200

    # Session cookie is automatically stored in test_client
    return test_client


@pytest.fixture
def clean_auth_sessions():
    """Clean up authentication sessions before and after tests."""
    from chef_menu.api import auth
    auth._sessions.clear()
    yield
    auth._sessions.clear()
