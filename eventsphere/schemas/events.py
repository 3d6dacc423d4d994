import datetime
from typing import Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


# ---------- Event ----------
class EventCreate(BaseModel):
    title: str = Field(min_length=1)
    date: datetime.date
    capacity: int
    time: str = ""
    location: str = ""
    description: str = ""
    full_description: str = ""
    category: str = ""

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class EventUpdate(BaseModel):
    title: Optional[str] = None
    date: Optional[datetime.date] = None
    time: Optional[str] = None
    location: Optional[str] = None
    description: Optional[str] = None
    full_description: Optional[str] = None
    category: Optional[str] = None
    capacity: Optional[int] = None
    registered: Optional[int] = None
    image: Optional[str] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True

    def changes(self) -> dict:
        """Fields the caller actually sent, minus explicit nulls."""
        return {
            key: value
            for key, value in self.model_dump(exclude_unset=True).items()
            if value is not None
        }


class EventOut(BaseModel):
    id: str
    title: str
    date: datetime.date
    time: str
    location: str
    description: str
    full_description: str
    category: str
    capacity: int
    registered: int
    image: str

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True
