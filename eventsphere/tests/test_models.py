"""
Test the Event and Registration records.
"""
import dataclasses
from datetime import date, datetime, timezone

import pytest

from eventsphere.models.events import DEFAULT_EVENT_IMAGE, Event
from eventsphere.models.registrations import Registration


class TestEventModel:
    """Test the Event record."""

    def test_defaults(self):
        """Test that optional display fields, counter and image have defaults."""
        event = Event(id="evt-1", title="Workshop", date=date(2026, 1, 1), capacity=10)

        assert event.registered == 0
        assert event.image == DEFAULT_EVENT_IMAGE
        assert event.location == ""
        assert event.full_description == ""

    def test_is_full(self):
        """Test the capacity check used by registration."""
        event = Event(id="evt-1", title="Workshop", date=date(2026, 1, 1), capacity=2, registered=1)
        assert event.is_full is False

        event.registered = 2
        assert event.is_full is True

    def test_is_full_when_over_capacity(self):
        """An admin edit can push registered above capacity; the event still reads as full."""
        event = Event(id="evt-1", title="Workshop", date=date(2026, 1, 1), capacity=2, registered=5)
        assert event.is_full is True


class TestRegistrationModel:
    """Test the Registration record."""

    def test_registration_is_immutable(self):
        """Test that a registration cannot be edited after creation."""
        registration = Registration(
            id="reg-1",
            event_id="evt-1",
            name="Asha",
            usn="1MS21CS001",
            email="asha@campus.edu",
            phone="9000000000",
            registered_at=datetime(2026, 2, 1, tzinfo=timezone.utc),
        )

        with pytest.raises(dataclasses.FrozenInstanceError):
            registration.name = "Someone Else"  # type: ignore[misc]
