"""Status endpoint polled by students."""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query

from lab_access_portal.app.api.deps import get_status_service
from lab_access_portal.app.services import StatusService

router = APIRouter()


@router.get("/status", response_model=Dict[str, Any])
async def get_status(
    email: Optional[str] = Query(None),
    service: StatusService = Depends(get_status_service),
) -> Dict[str, Any]:
    """Return ``{"found": false}`` or the student's active request.

    ``labUrl`` is ``null`` until an administrator approves the request.
    """
    view = await service.lookup(email)
    if view is None:
        return {"found": False}
    return {"found": True, **view.model_dump(by_alias=True)}
