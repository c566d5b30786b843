"""
Administrator endpoints.

Credentials are passed with every call: as query parameters when
listing requests and in the JSON body when approving one.  A wrong
username or password yields HTTP 401 before any data is read.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query

from lab_access_portal.app.api.deps import get_admin_service
from lab_access_portal.app.schemas.lab_request import LabRequestApprove
from lab_access_portal.app.services import AdminService

router = APIRouter()


@router.get("/requests", response_model=Dict[str, Any])
async def list_requests(
    username: Optional[str] = Query(None),
    password: Optional[str] = Query(None),
    service: AdminService = Depends(get_admin_service),
) -> Dict[str, Any]:
    """Return every request, newest first."""
    requests = await service.list_all(username, password)
    return {"requests": [r.to_document() for r in requests]}


@router.post("/approve/{request_id}", response_model=Dict[str, Any])
async def approve_request(
    request_id: str,
    payload: Optional[LabRequestApprove] = None,
    service: AdminService = Depends(get_admin_service),
) -> Dict[str, Any]:
    """Approve a request and attach the lab URL."""
    payload = payload or LabRequestApprove()
    await service.approve(request_id, payload.lab_url, payload.username, payload.password)
    return {"success": True, "message": "Request approved successfully"}
