"""
Service layer abstraction.

Each service encapsulates the business logic for one part of the
portal and works on an injected ``JSONFileStore``, so the storage
backend can be replaced without changing the API handlers.
"""

from .admin_service import AdminService
from .request_service import RequestService
from .status_service import StatusService

__all__ = ["AdminService", "RequestService", "StatusService"]
