from dataclasses import dataclass
import datetime

DEFAULT_EVENT_IMAGE = "/images/hero-campus.jpg"


@dataclass
class Event:
    id: str
    title: str
    date: datetime.date
    capacity: int
    time: str = ""
    location: str = ""
    description: str = ""
    full_description: str = ""
    category: str = ""
    registered: int = 0
    image: str = DEFAULT_EVENT_IMAGE

    @property
    def is_full(self) -> bool:
        return self.registered >= self.capacity
