"""
Main entrypoint for the Lab Access Portal.

This module assembles the FastAPI application: it sets up logging,
creates the JSON store and the services, registers error handlers and
includes the API and page routers.  The ``create_app`` function builds
the app, which is then instantiated at module import time as ``app``
so it can be served directly, e.g.::

    uvicorn lab_access_portal.app.main:app --reload
"""

import logging
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from .api.router import api_router, pages_router
from .core.config import Settings, get_data_path, settings as default_settings
from .core.errors import PortalError, StorageError
from .core.logging_config import setup_logging
from .core.store import JSONFileStore
from .services import AdminService, RequestService, StatusService

logger = logging.getLogger(__name__)

INTERNAL_ERROR = "Internal server error"


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def register_error_handlers(app: FastAPI) -> None:
    """Translate service exceptions into JSON error responses."""

    @app.exception_handler(PortalError)
    async def portal_error_handler(request: Request, exc: PortalError) -> JSONResponse:
        if isinstance(exc, StorageError):
            logger.error("Storage failure on %s %s: %s", request.method, request.url.path, exc.message, exc_info=exc)
            return _error(exc.status_code, INTERNAL_ERROR)
        return _error(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.debug("Rejected malformed body on %s: %s", request.url.path, exc.errors())
        return _error(status.HTTP_400_BAD_REQUEST, "Invalid request body")

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)


def create_app(config: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    config : Optional[Settings]
        Settings to use instead of the environment-derived defaults.
        Tests pass their own instance to point the store at a temporary
        file.

    Returns
    -------
    FastAPI
        A configured application.  The data file is created on startup
        if missing; a failure there aborts startup.
    """
    config = config or default_settings
    setup_logging(config.log_level, config.log_file or None)

    app = FastAPI(title=config.project_name, version=config.api_version)

    store = JSONFileStore(get_data_path(config))
    app.state.settings = config
    app.state.store = store
    app.state.request_service = RequestService(store)
    app.state.status_service = StatusService(store)
    app.state.admin_service = AdminService(store, config)

    register_error_handlers(app)

    app.include_router(api_router, prefix="/api")
    app.include_router(pages_router)

    # Remaining frontend assets (stylesheets, scripts) are served as-is.
    if Path(config.frontend_dir).is_dir():
        app.mount("/", StaticFiles(directory=config.frontend_dir), name="frontend")

    @app.on_event("startup")
    async def startup_event() -> None:
        store.init()

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
