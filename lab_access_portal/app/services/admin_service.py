"""
Service layer for the administrator dashboard.

Every operation takes the administrator's username and password and
checks them before touching storage.  Approval moves a request from
``pending`` to ``approved`` and attaches the lab URL the student should
use.  Approving an already approved request is allowed and replaces
its URL and approval time.
"""

import logging
from typing import List, Optional

from lab_access_portal.app.core.config import Settings
from lab_access_portal.app.core.errors import NotFoundError, ValidationError
from lab_access_portal.app.core.security import require_admin, verify_admin
from lab_access_portal.app.core.store import JSONFileStore
from lab_access_portal.app.schemas.lab_request import (
    APPROVED,
    LabRequest,
    parse_timestamp,
    utc_timestamp,
)

logger = logging.getLogger(__name__)


class AdminService:
    """Administrator operations on the request collection."""

    def __init__(self, store: JSONFileStore, config: Settings) -> None:
        self.store = store
        self.config = config

    def authenticate(self, username: Optional[str], password: Optional[str]) -> bool:
        """Return whether the credentials match the configured administrator."""
        return verify_admin(username, password, self.config)

    async def list_all(self, username: Optional[str], password: Optional[str]) -> List[LabRequest]:
        """Return every request, most recently created first."""
        require_admin(username, password, self.config)
        requests = await self.store.aload()
        return sorted(requests, key=lambda r: parse_timestamp(r.created_at), reverse=True)

    async def approve(
        self,
        request_id: str,
        lab_url: Optional[str],
        username: Optional[str],
        password: Optional[str],
    ) -> LabRequest:
        """Approve ``request_id`` and attach ``lab_url`` (whitespace trimmed).

        Raises ``AuthError`` for bad credentials, ``ValidationError`` for a
        blank URL and ``NotFoundError`` for an unknown id.  Nothing is
        written unless all checks pass.
        """
        require_admin(username, password, self.config)
        lab_url = (lab_url or "").strip()
        if not lab_url:
            raise ValidationError("Lab URL is required")

        async with self.store.lock:
            requests = await self.store.aload()
            request = next((r for r in requests if r.id == request_id), None)
            if request is None:
                raise NotFoundError("Request not found")
            if request.status == APPROVED:
                logger.info("Request %s was already approved; replacing its lab URL", request_id)
            request.status = APPROVED
            request.lab_url = lab_url
            request.approved_at = utc_timestamp()
            await self.store.asave(requests)

        logger.info("Approved lab request %s", request_id)
        return request
