from datetime import datetime, timezone

from fastapi import APIRouter

from eventsphere.schemas.admin import HealthOut

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthOut)
def health():
    return HealthOut(status="OK", timestamp=datetime.now(timezone.utc))
