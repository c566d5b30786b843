"""
Top-level routers.

``api_router`` carries the JSON API and is mounted under ``/api``;
``pages_router`` serves the HTML pages from the site root.
"""

from fastapi import APIRouter

from .endpoints import admin, pages, requests, status

api_router = APIRouter()

api_router.include_router(requests.router, tags=["requests"])
api_router.include_router(status.router, tags=["status"])
api_router.include_router(admin.router, prefix="/admin", tags=["admin"])

pages_router = pages.router
