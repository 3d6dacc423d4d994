"""HTTP client for the EventSphere API.

Mirrors the helpers the web frontend uses: a failed call, whether the
server answered with an error status or could not be reached at all, is
logged and turned into an empty result (``[]``, ``None`` or ``False``)
instead of raising. Callers render "nothing" rather than an error page.
"""
import logging
from typing import Any, Optional

import httpx

from eventsphere.core.config import get_api_url

logger = logging.getLogger(__name__)


class EventSphereClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        timeout_s: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = (base_url or get_api_url()).rstrip("/")
        self.timeout_s = timeout_s
        self._transport = transport

    def _request(self, method: str, path: str, **kwargs) -> Optional[httpx.Response]:
        try:
            with httpx.Client(base_url=self.base_url, timeout=self.timeout_s, transport=self._transport) as client:
                res = client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.warning("%s %s failed: %s", method, path, e)
            return None
        if res.is_error:
            logger.warning("%s %s returned %s: %s", method, path, res.status_code, res.text)
            return None
        return res

    # ---------- Public catalog ----------
    def get_all_events(self) -> list[dict[str, Any]]:
        res = self._request("GET", "/api/events")
        return res.json() if res is not None else []

    def get_event(self, event_id: str) -> Optional[dict[str, Any]]:
        res = self._request("GET", f"/api/events/{event_id}")
        return res.json() if res is not None else None

    def register(self, event_id: str, *, name: str, usn: str, email: str, phone: str) -> Optional[dict[str, Any]]:
        payload = {"eventId": event_id, "name": name, "usn": usn, "email": email, "phone": phone}
        res = self._request("POST", "/api/register", json=payload)
        return res.json() if res is not None else None

    # ---------- Admin dashboard ----------
    def login(self, username: str, password: str) -> bool:
        res = self._request("POST", "/api/admin", json={"username": username, "password": password})
        return res is not None

    def list_registrations(self) -> list[dict[str, Any]]:
        res = self._request("GET", "/api/register")
        return res.json() if res is not None else []

    def create_event(self, **fields: Any) -> Optional[dict[str, Any]]:
        res = self._request("POST", "/api/events", json=fields)
        return res.json() if res is not None else None

    def update_event(self, event_id: str, **fields: Any) -> Optional[dict[str, Any]]:
        res = self._request("PUT", f"/api/events/{event_id}", json=fields)
        return res.json() if res is not None else None

    def delete_event(self, event_id: str) -> bool:
        return self._request("DELETE", f"/api/events/{event_id}") is not None

    def health(self) -> Optional[dict[str, Any]]:
        res = self._request("GET", "/health")
        return res.json() if res is not None else None
