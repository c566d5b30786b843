"""Entry point for the Lab Access Portal.

Starts the FastAPI application with Uvicorn.  Host, port, data file and
administrator credentials are read from environment variables (see
``lab_access_portal.app.core.config``).

Usage:
    python run.py
"""
import logging
import sys

from uvicorn import Config, Server

from lab_access_portal.app.core.config import settings
from lab_access_portal.app.core.logging_config import setup_logging
from lab_access_portal.app.main import app


def main() -> None:
    """Serve the portal until interrupted.

    A failure to initialise the data file during startup makes Uvicorn
    exit without serving; the process then exits with status 1.
    """
    setup_logging(settings.log_level, settings.log_file or None)
    logger = logging.getLogger("lab_access_portal")
    logger.info("Lab Access Portal running on http://localhost:%s", settings.port)
    logger.info("Admin username: %s", settings.admin_username)
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        lifespan="on",
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    server.run()
    if not server.started:
        logger.error("Failed to start: data file could not be initialised")
        sys.exit(1)


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        pass
