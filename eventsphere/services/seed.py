"""Demo catalog loaded into a fresh registry."""
from datetime import date, datetime, timezone

from eventsphere.models.events import Event
from eventsphere.models.registrations import Registration
from eventsphere.services.registry import EventRegistry

DEMO_EVENTS = (
    Event(
        id="evt-001",
        title="Annual Tech Symposium 2026",
        date=date(2026, 3, 15),
        time="10:00 AM",
        location="Main Auditorium, Block A",
        description="A full-day symposium featuring talks on AI, Cloud Computing, and Cybersecurity.",
        full_description=(
            "Join us for the Annual Tech Symposium 2026, a full-day event featuring keynote speakers "
            "from leading tech companies. Topics include Artificial Intelligence, Cloud Computing, "
            "Cybersecurity, and the future of Web Development. Network with industry professionals "
            "and participate in interactive workshops. Lunch and refreshments will be provided."
        ),
        category="Technology",
        capacity=300,
        registered=142,
    ),
    Event(
        id="evt-002",
        title="Cultural Fest - Resonance",
        date=date(2026, 3, 22),
        time="9:00 AM",
        location="Open Air Theatre",
        description="Three days of music, dance, drama, and art celebrating campus creativity.",
        full_description=(
            "Resonance is our annual cultural extravaganza spanning three days of non-stop "
            "entertainment. From classical dance competitions to rock band battles, stand-up comedy "
            "to theatrical performances, there's something for everyone. Participate in art "
            "exhibitions, photography contests, and creative writing workshops. Special guest "
            "performances to be announced soon!"
        ),
        category="Cultural",
        capacity=500,
        registered=287,
    ),
    Event(
        id="evt-003",
        title="Hackathon: Code Sprint 5.0",
        date=date(2026, 4, 5),
        time="8:00 AM",
        location="CS Lab Complex, Block C",
        description="24-hour coding marathon with exciting prizes and mentorship opportunities.",
        full_description=(
            "Code Sprint 5.0 is a 24-hour hackathon where teams of 2-4 build innovative solutions to "
            "real-world problems. Categories include HealthTech, EdTech, FinTech, and Sustainability. "
            "Industry mentors will guide you throughout the event. Top 3 teams win cash prizes, "
            "internship opportunities, and swag kits. All participants receive certificates and meals."
        ),
        category="Technology",
        capacity=200,
        registered=156,
    ),
)

DEMO_REGISTRATIONS = (
    Registration(
        id="reg-001",
        event_id="evt-001",
        name="Priya Sharma",
        usn="1MS21CS045",
        email="priya.sharma@campus.edu",
        phone="9876543210",
        registered_at=datetime(2026, 2, 20, 10, 30, tzinfo=timezone.utc),
    ),
)


def seed_demo_data(registry: EventRegistry) -> None:
    # Counters are taken as-is, not recomputed from DEMO_REGISTRATIONS
    registry.load(DEMO_EVENTS, DEMO_REGISTRATIONS)
