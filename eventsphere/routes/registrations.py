from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from eventsphere.database.store import get_registry
from eventsphere.schemas.registrations import RegisterRequest, RegistrationOut
from eventsphere.services.registry import (
    CapacityExceededError,
    EventRegistry,
    InvalidInputError,
    NotFoundError,
)

router = APIRouter(prefix="/api/register", tags=["registrations"])


@router.get("", response_model=list[RegistrationOut])
def list_registrations(registry: EventRegistry = Depends(get_registry)):
    """Every registration across all events, oldest first."""
    return registry.list_registrations()


@router.post("", response_model=RegistrationOut, status_code=201)
def register(payload: Optional[RegisterRequest] = None, registry: EventRegistry = Depends(get_registry)):
    # A bodiless request is treated as one with every field missing
    if payload is None:
        payload = RegisterRequest()
    try:
        return registry.register(
            event_id=payload.event_id,
            name=payload.name,
            usn=payload.usn,
            email=payload.email,
            phone=payload.phone,
        )
    except (InvalidInputError, CapacityExceededError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
