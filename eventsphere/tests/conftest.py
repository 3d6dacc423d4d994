from datetime import date

import pytest
from fastapi.testclient import TestClient

from eventsphere.database.store import get_registry
from eventsphere.main import app
from eventsphere.services.registry import EventRegistry

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "eventsphere2026"


@pytest.fixture
def registry() -> EventRegistry:
    """A fresh, empty registry for every test."""
    return EventRegistry(admin_username=ADMIN_USERNAME, admin_password=ADMIN_PASSWORD)


@pytest.fixture
def client(registry: EventRegistry):
    # Override the registry dependency
    app.dependency_overrides[get_registry] = lambda: registry
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.pop(get_registry, None)


@pytest.fixture
def make_event(registry: EventRegistry):
    """Create an event directly in the registry with sensible defaults."""

    def _make_event(**overrides):
        fields = {
            "title": "Test Event",
            "date": date(2026, 5, 1),
            "time": "10:00 AM",
            "location": "Seminar Hall",
            "description": "Short description",
            "full_description": "A much longer description of the event.",
            "category": "Technology",
            "capacity": 10,
        }
        fields.update(overrides)
        return registry.create_event(**fields)

    return _make_event


@pytest.fixture
def student() -> dict[str, str]:
    return {
        "name": "Priya Sharma",
        "usn": "1MS21CS045",
        "email": "priya.sharma@campus.edu",
        "phone": "9876543210",
    }
