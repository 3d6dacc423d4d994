import logging

from eventsphere.core.config import get_admin_credentials, should_seed_demo_data
from eventsphere.services.registry import EventRegistry
from eventsphere.services.seed import seed_demo_data

logger = logging.getLogger(__name__)


def build_registry(*, seed: bool | None = None) -> EventRegistry:
    username, password = get_admin_credentials()
    registry = EventRegistry(admin_username=username, admin_password=password)
    if should_seed_demo_data() if seed is None else seed:
        seed_demo_data(registry)
        events, registrations = registry.snapshot()
        logger.info("Loaded demo catalog (%d events, %d registrations)", len(events), len(registrations))
    return registry


# Process-wide state; resets on restart
registry = build_registry()


def get_registry() -> EventRegistry:
    return registry
