"""
Lab request submission endpoint.

Students post their name, email and the lab they need.  Only one active
request per email is accepted; a second submission is rejected with
HTTP 400 until the first one is gone.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends

from lab_access_portal.app.api.deps import get_request_service
from lab_access_portal.app.schemas.lab_request import LabRequestCreate
from lab_access_portal.app.services import RequestService

router = APIRouter()


@router.post("/request", response_model=Dict[str, Any])
async def submit_request(
    payload: Optional[LabRequestCreate] = None,
    service: RequestService = Depends(get_request_service),
) -> Dict[str, Any]:
    """Create a pending lab request and return its id."""
    payload = payload or LabRequestCreate()
    request_id = await service.submit(payload.name, payload.email, payload.lab_name)
    return {
        "success": True,
        "message": "Request submitted successfully",
        "requestId": request_id,
    }
