"""
HTML pages for students and the administrator.

The pages themselves are static files; they talk to the JSON API from
the browser.  Files are looked up in ``settings.frontend_dir`` on every
request so they can be edited without restarting the server.
"""

from pathlib import Path

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse

from lab_access_portal.app.api.deps import get_settings
from lab_access_portal.app.core.config import Settings
from lab_access_portal.app.core.errors import NotFoundError

router = APIRouter()


def _page(config: Settings, filename: str) -> FileResponse:
    path = Path(config.frontend_dir) / filename
    if not path.is_file():
        raise NotFoundError("Page not found")
    return FileResponse(path, media_type="text/html")


@router.get("/", include_in_schema=False)
async def request_page(config: Settings = Depends(get_settings)) -> FileResponse:
    return _page(config, "index.html")


@router.get("/status", include_in_schema=False)
async def status_page(config: Settings = Depends(get_settings)) -> FileResponse:
    return _page(config, "status.html")


@router.get("/admin", include_in_schema=False)
async def admin_page(config: Settings = Depends(get_settings)) -> FileResponse:
    return _page(config, "admin.html")
