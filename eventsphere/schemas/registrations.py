from datetime import datetime
from typing import Optional

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class RegisterRequest(BaseModel):
    # Presence is checked by the registry so missing fields answer 400, not 422
    event_id: Optional[str] = None
    name: Optional[str] = None
    usn: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        coerce_numbers_to_str = True


class RegistrationOut(BaseModel):
    id: str
    event_id: str
    name: str
    usn: str
    email: str
    phone: str
    registered_at: datetime

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True
