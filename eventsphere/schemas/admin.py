from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class AdminLogin(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None


class SuccessOut(BaseModel):
    success: bool = True


class HealthOut(BaseModel):
    status: str
    timestamp: datetime
