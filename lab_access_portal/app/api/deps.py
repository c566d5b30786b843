"""
FastAPI dependencies giving endpoints access to the services.

The services are created once per application in ``create_app`` and
kept on ``app.state``; these helpers fetch them for the current request.
"""

from fastapi import Request

from lab_access_portal.app.core.config import Settings
from lab_access_portal.app.services import AdminService, RequestService, StatusService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_request_service(request: Request) -> RequestService:
    return request.app.state.request_service


def get_status_service(request: Request) -> StatusService:
    return request.app.state.status_service


def get_admin_service(request: Request) -> AdminService:
    return request.app.state.admin_service
