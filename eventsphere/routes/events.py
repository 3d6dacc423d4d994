from fastapi import APIRouter, Depends, HTTPException

from eventsphere.database.store import get_registry
from eventsphere.schemas.admin import SuccessOut
from eventsphere.schemas.events import EventCreate, EventOut, EventUpdate
from eventsphere.services.registry import EventRegistry, InvalidInputError, NotFoundError

router = APIRouter(prefix="/api/events", tags=["events"])


@router.get("", response_model=list[EventOut])
def list_events(registry: EventRegistry = Depends(get_registry)):
    return registry.list_events()


@router.post("", response_model=EventOut, status_code=201)
def create_event(payload: EventCreate, registry: EventRegistry = Depends(get_registry)):
    return registry.create_event(**payload.model_dump())


@router.get("/{event_id}", response_model=EventOut)
def get_event(event_id: str, registry: EventRegistry = Depends(get_registry)):
    try:
        return registry.get_event(event_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.put("/{event_id}", response_model=EventOut)
def update_event(event_id: str, payload: EventUpdate, registry: EventRegistry = Depends(get_registry)):
    try:
        return registry.update_event(event_id, **payload.changes())
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.delete("/{event_id}", response_model=SuccessOut)
def delete_event(event_id: str, registry: EventRegistry = Depends(get_registry)):
    try:
        registry.delete_event(event_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return SuccessOut()
