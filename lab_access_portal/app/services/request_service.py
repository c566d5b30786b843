"""
Service layer for submitting lab access requests.

A student may hold at most one active (pending or approved) request per
email address.  Emails are lowercased before they are compared or
stored, so ``Ann@x.com`` and ``ann@x.com`` are the same student.
"""

import logging
import secrets
from typing import Optional

from lab_access_portal.app.core.errors import ConflictError, ValidationError
from lab_access_portal.app.core.store import JSONFileStore
from lab_access_portal.app.schemas.lab_request import PENDING, LabRequest, utc_timestamp

logger = logging.getLogger(__name__)


class RequestService:
    """Creates new lab requests."""

    def __init__(self, store: JSONFileStore) -> None:
        self.store = store

    async def submit(
        self,
        name: Optional[str],
        email: Optional[str],
        lab_name: Optional[str],
    ) -> str:
        """Store a new pending request and return its id.

        Raises ``ValidationError`` if any field is missing or empty and
        ``ConflictError`` if the email already has an active request.
        """
        if not name or not email or not lab_name:
            raise ValidationError("All fields are required")
        email = email.lower()

        async with self.store.lock:
            requests = await self.store.aload()
            if any(r.email.lower() == email and r.is_active for r in requests):
                raise ConflictError("You already have an active request. Please check your status.")

            new_request = LabRequest(
                id=secrets.token_hex(16),
                name=name,
                email=email,
                lab_name=lab_name,
                status=PENDING,
                created_at=utc_timestamp(),
            )
            requests.append(new_request)
            await self.store.asave(requests)

        logger.info("Created lab request %s for %s (%s)", new_request.id, email, lab_name)
        return new_request.id
