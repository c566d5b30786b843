"""Status lookups for students polling their own request."""

from typing import Optional

from lab_access_portal.app.core.errors import ValidationError
from lab_access_portal.app.core.store import JSONFileStore
from lab_access_portal.app.schemas.lab_request import StatusView


class StatusService:
    def __init__(self, store: JSONFileStore) -> None:
        self.store = store

    async def lookup(self, email: Optional[str]) -> Optional[StatusView]:
        """Return the active request for ``email``, or ``None`` if there is none.

        The lab URL is withheld until the request has been approved.
        """
        if not email:
            raise ValidationError("Email is required")
        email = email.lower()
        for request in await self.store.aload():
            if request.email.lower() == email and request.is_active:
                return StatusView.from_request(request)
        return None
