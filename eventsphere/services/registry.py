import logging
import threading
import uuid
from dataclasses import fields as dataclass_fields, replace
from datetime import datetime, timezone
from typing import Iterable, Optional

from eventsphere.models.events import DEFAULT_EVENT_IMAGE, Event
from eventsphere.models.registrations import Registration

logger = logging.getLogger(__name__)

# Fields an admin edit may never overwrite
_IMMUTABLE_EVENT_FIELDS = frozenset({"id"})
# Fields the registry assigns itself on create
_SYSTEM_EVENT_FIELDS = frozenset({"id", "registered", "image"})
_EVENT_FIELD_NAMES = frozenset(field.name for field in dataclass_fields(Event))


class RegistryError(Exception):
    pass


class NotFoundError(RegistryError):
    pass


class InvalidInputError(RegistryError):
    pass


class CapacityExceededError(RegistryError):
    pass


class InvalidCredentialsError(RegistryError):
    pass


class EventRegistry:
    """
    In-memory owner of events and registrations.

    Both collections are ordered dicts keyed by id and guarded by a single
    lock, so a registration's capacity check, append and counter increment
    happen as one step. Reads take the lock as well and return copies.
    """

    def __init__(self, *, admin_username: str, admin_password: str):
        self._admin_username = admin_username
        self._admin_password = admin_password
        self._events: dict[str, Event] = {}
        self._registrations: dict[str, Registration] = {}
        # Every id ever handed out, including deleted events
        self._issued_ids: set[str] = set()
        self._lock = threading.RLock()

    # ---------- Events ----------
    def list_events(self) -> list[Event]:
        with self._lock:
            return [replace(event) for event in self._events.values()]

    def get_event(self, event_id: str) -> Event:
        with self._lock:
            return replace(self._get_event_locked(event_id))

    def create_event(self, **fields) -> Event:
        fields = {key: value for key, value in fields.items() if key not in _SYSTEM_EVENT_FIELDS}
        with self._lock:
            event = Event(
                **fields,
                id=self._new_id_locked("evt"),
                registered=0,
                image=DEFAULT_EVENT_IMAGE,
            )
            self._events[event.id] = event
            logger.info("Created event %s (%r, capacity=%s)", event.id, event.title, event.capacity)
            return replace(event)

    def update_event(self, event_id: str, **fields) -> Event:
        with self._lock:
            event = self._get_event_locked(event_id)
            unknown = set(fields) - _EVENT_FIELD_NAMES
            if unknown:
                raise InvalidInputError(f"Unknown event fields: {', '.join(sorted(unknown))}")
            for key, value in fields.items():
                if key not in _IMMUTABLE_EVENT_FIELDS:
                    setattr(event, key, value)

            if event.registered > event.capacity:
                logger.warning(
                    "Event %s now has registered=%s above capacity=%s",
                    event.id,
                    event.registered,
                    event.capacity,
                )
            logger.info("Updated event %s (%s)", event.id, ", ".join(sorted(fields)) or "no fields")
            return replace(event)

    def delete_event(self, event_id: str) -> None:
        """Remove an event. Its registrations are left in place."""
        with self._lock:
            if self._events.pop(event_id, None) is None:
                raise NotFoundError("Event not found")
            logger.info("Deleted event %s", event_id)

    # ---------- Registrations ----------
    def list_registrations(self) -> list[Registration]:
        with self._lock:
            return list(self._registrations.values())

    def register(
        self,
        *,
        event_id: Optional[str],
        name: Optional[str],
        usn: Optional[str],
        email: Optional[str],
        phone: Optional[str],
    ) -> Registration:
        if not all((event_id, name, usn, email, phone)):
            raise InvalidInputError("Missing required fields")

        with self._lock:
            event = self._get_event_locked(event_id)
            if event.is_full:
                logger.warning(
                    "Rejected registration for %s: full (%s/%s)",
                    event.id,
                    event.registered,
                    event.capacity,
                )
                raise CapacityExceededError("Event is at full capacity")

            registration = Registration(
                id=self._new_id_locked("reg"),
                event_id=event.id,
                name=name,
                usn=usn,
                email=email,
                phone=phone,
                registered_at=datetime.now(timezone.utc),
            )
            self._registrations[registration.id] = registration
            event.registered += 1
            logger.info(
                "Registered %s for event %s (%s/%s)",
                registration.usn,
                event.id,
                event.registered,
                event.capacity,
            )
            return registration

    def snapshot(self) -> tuple[list[Event], list[Registration]]:
        """
        Events and registrations read under one lock acquisition.

        Separate list_events() and list_registrations() calls can straddle a
        registration; this pair always agrees on every event's counter.
        """
        with self._lock:
            return self.list_events(), self.list_registrations()

    # ---------- Admin ----------
    def verify_admin(self, username: Optional[str], password: Optional[str]) -> None:
        if username == self._admin_username and password == self._admin_password:
            return
        logger.warning("Failed admin login for username %r", username)
        raise InvalidCredentialsError("Invalid credentials")

    # ---------- Bulk loading ----------
    def load(self, events: Iterable[Event] = (), registrations: Iterable[Registration] = ()) -> None:
        """
        Insert prebuilt records verbatim, e.g. the demo catalog.

        The batch is all-or-nothing: an id already issued by this registry,
        or repeated within the batch, rejects the whole load.
        """
        events = list(events)
        registrations = list(registrations)
        with self._lock:
            seen: set[str] = set()
            for record in (*events, *registrations):
                if record.id in self._issued_ids or record.id in seen:
                    raise InvalidInputError(f"Duplicate id: {record.id}")
                seen.add(record.id)

            for event in events:
                self._events[event.id] = replace(event)
            for registration in registrations:
                self._registrations[registration.id] = registration
            self._issued_ids |= seen

    # ---------- Internals ----------
    def _get_event_locked(self, event_id: Optional[str]) -> Event:
        event = self._events.get(event_id) if event_id is not None else None
        if event is None:
            raise NotFoundError("Event not found")
        return event

    def _new_id_locked(self, prefix: str) -> str:
        while True:
            candidate = f"{prefix}-{uuid.uuid4().hex[:12]}"
            if candidate not in self._issued_ids:
                self._issued_ids.add(candidate)
                return candidate
