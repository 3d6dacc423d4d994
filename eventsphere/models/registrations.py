from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Registration:
    id: str
    event_id: str
    name: str
    usn: str
    email: str
    phone: str
    registered_at: datetime
