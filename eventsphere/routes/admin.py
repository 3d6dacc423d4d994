from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from eventsphere.database.store import get_registry
from eventsphere.schemas.admin import AdminLogin, SuccessOut
from eventsphere.services.registry import EventRegistry, InvalidCredentialsError

router = APIRouter(prefix="/api/admin", tags=["admin"])


@router.post("", response_model=SuccessOut)
def admin_login(payload: Optional[AdminLogin] = None, registry: EventRegistry = Depends(get_registry)):
    if payload is None:
        payload = AdminLogin()
    # No session is issued; the dashboard keeps its own logged-in flag
    try:
        registry.verify_admin(payload.username, payload.password)
    except InvalidCredentialsError as e:
        raise HTTPException(status_code=401, detail=str(e))
    return SuccessOut()
