"""
Test the demo catalog and the process-wide registry built from config.
"""
from datetime import datetime, timezone

from eventsphere.database import store
from eventsphere.services.seed import DEMO_EVENTS, DEMO_REGISTRATIONS, seed_demo_data


def test_seed_demo_data(registry):
    seed_demo_data(registry)

    events = registry.list_events()
    assert [e.id for e in events] == ["evt-001", "evt-002", "evt-003"]
    assert [(e.capacity, e.registered) for e in events] == [(300, 142), (500, 287), (200, 156)]

    [registration] = registry.list_registrations()
    assert registration.id == "reg-001"
    assert registration.event_id == "evt-001"
    assert registration.registered_at == datetime(2026, 2, 20, 10, 30, tzinfo=timezone.utc)


def test_seeded_events_are_copies(registry):
    """Registering against seeded data does not mutate the module constants."""
    seed_demo_data(registry)
    registry.register(event_id="evt-003", name="A", usn="B", email="C", phone="D")

    assert registry.get_event("evt-003").registered == 157
    assert DEMO_EVENTS[2].registered == 156
    assert len(DEMO_REGISTRATIONS) == 1


def test_build_registry_with_seed(monkeypatch):
    monkeypatch.setattr(store, "should_seed_demo_data", lambda: True)
    assert len(store.build_registry().list_events()) == 3


def test_build_registry_without_seed(monkeypatch):
    monkeypatch.setattr(store, "should_seed_demo_data", lambda: False)
    registry = store.build_registry()

    assert registry.list_events() == []
    assert registry.list_registrations() == []


def test_build_registry_explicit_seed_flag_wins(monkeypatch):
    monkeypatch.setattr(store, "should_seed_demo_data", lambda: False)
    assert len(store.build_registry(seed=True).list_events()) == 3


def test_build_registry_uses_configured_credentials(monkeypatch):
    monkeypatch.setattr(store, "get_admin_credentials", lambda: ("ops", "s3cret"))
    registry = store.build_registry(seed=False)

    registry.verify_admin("ops", "s3cret")


def test_get_registry_is_process_wide():
    assert store.get_registry() is store.get_registry()


def test_build_registry_logs_seeded_counts(monkeypatch, caplog):
    monkeypatch.setattr(store, "should_seed_demo_data", lambda: True)
    with caplog.at_level("INFO", logger="eventsphere.database.store"):
        store.build_registry()

    assert "Loaded demo catalog (3 events, 1 registrations)" in caplog.text
