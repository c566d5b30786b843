"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
portal starts without any setup; in a real deployment you should at
least override the administrator credentials.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from .logging_config import normalize_level

# lab_access_portal/
PACKAGE_DIR = Path(__file__).resolve().parent.parent.parent


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Lab Access Portal")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # Shared secrets for the single administrator account.  Both values
    # are compared literally; there is no user table.
    admin_username: str = os.getenv("ADMIN_USERNAME", "admin")
    admin_password: str = os.getenv("ADMIN_PASSWORD", "admin123")

    # Path of the JSON document holding all lab requests.  Relative
    # paths are resolved against the project root by ``get_data_path``.
    data_file: str = os.getenv("DATA_FILE", "db.json")

    # Directory with the student and admin HTML pages.
    frontend_dir: str = os.getenv("FRONTEND_DIR", str(PACKAGE_DIR / "frontend"))

    def __post_init__(self) -> None:
        # Uvicorn rejects unknown level names, so fix the value up once here.
        self.log_level = normalize_level(self.log_level)


def get_data_path(config: Settings) -> Path:
    """Return the absolute path of the data file for ``config``."""
    path = Path(config.data_file)
    if path.is_absolute():
        return path
    return (PACKAGE_DIR.parent / path).resolve()


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before importing this module.
settings = Settings()
