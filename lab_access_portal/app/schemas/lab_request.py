"""
Pydantic schemas for lab access requests.

``LabRequest`` is the stored entity.  Its attributes are exposed and
persisted with camelCase keys (``labName``, ``createdAt``...) while
Python code uses snake_case names.  The ``*Create``/``*Approve`` models
describe incoming JSON bodies; every field is optional there so that
missing values reach the services and are reported as validation
errors with the portal's own messages.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, Field

PENDING = "pending"
APPROVED = "approved"
ACTIVE_STATUSES = frozenset([PENDING, APPROVED])


def utc_timestamp() -> str:
    """Return the current UTC time as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_timestamp(value: str) -> datetime:
    """Parse a timestamp produced by ``utc_timestamp``."""
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


class LabRequest(BaseModel):
    """A student's request for access to a lab."""

    id: str
    name: str
    email: str
    lab_name: str = Field(..., alias="labName")
    status: Literal["pending", "approved"] = PENDING
    lab_url: Optional[str] = Field(None, alias="labUrl")
    created_at: str = Field(..., alias="createdAt")
    approved_at: Optional[str] = Field(None, alias="approvedAt")

    model_config = {
        "populate_by_name": True,
    }

    @property
    def is_active(self) -> bool:
        return self.status in ACTIVE_STATUSES

    def to_document(self) -> Dict[str, Any]:
        """Serialise with camelCase keys, leaving out unset optional fields."""
        return self.model_dump(by_alias=True, exclude_none=True)


class LabRequestCreate(BaseModel):
    """Body of ``POST /api/request``."""

    name: Optional[str] = Field(None, example="Ann")
    email: Optional[str] = Field(None, example="ann@example.com")
    lab_name: Optional[str] = Field(None, alias="labName", example="NLP-Lab")

    model_config = {
        "populate_by_name": True,
    }


class AdminCredentials(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None


class LabRequestApprove(AdminCredentials):
    """Body of ``POST /api/admin/approve/{request_id}``."""

    lab_url: Optional[str] = Field(None, alias="labUrl", example="https://lab.example/ann")

    model_config = {
        "populate_by_name": True,
    }


class StatusView(BaseModel):
    """What a student sees about their active request.

    ``lab_url`` is only filled in once the request is approved.
    """

    status: str
    name: str
    lab_name: str = Field(..., alias="labName")
    lab_url: Optional[str] = Field(None, alias="labUrl")
    created_at: str = Field(..., alias="createdAt")

    model_config = {
        "populate_by_name": True,
    }

    @classmethod
    def from_request(cls, request: LabRequest) -> "StatusView":
        return cls(
            status=request.status,
            name=request.name,
            lab_name=request.lab_name,
            lab_url=request.lab_url if request.status == APPROVED else None,
            created_at=request.created_at,
        )
