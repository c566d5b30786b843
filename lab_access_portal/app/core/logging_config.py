"""
Logging configuration for the portal.

``setup_logging`` attaches one console handler (and optionally a file
handler) to the root logger, so portal modules, FastAPI and Uvicorn all
log in the same format.  Calling it again is a no-op.  Level names are
checked by ``normalize_level`` because the same value is also handed to
Uvicorn, which only knows the standard names.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
DEFAULT_LEVEL = "INFO"


def normalize_level(level: Optional[str]) -> str:
    """Return ``level`` upper-cased, or ``INFO`` if it is not a standard name."""
    name = (level or "").strip().upper()
    return name if name in LEVELS else DEFAULT_LEVEL


def setup_logging(level: str = DEFAULT_LEVEL, logfile: Optional[str] = None) -> None:
    """Configure the root logger once.

    Parameters
    ----------
    level : str
        Logging level name; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Extra file to write the log to.  Missing parent directories are
        created.
    """
    root = logging.getLogger()
    if root.handlers:
        return
    root.setLevel(normalize_level(level))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler()]
    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
