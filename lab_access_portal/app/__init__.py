"""
Application package initializer.

The portal is split into ``core`` (configuration, logging, errors,
storage, credential checks), ``schemas`` (pydantic models),
``services`` (business logic) and ``api`` (FastAPI routers).
``main`` wires them together.
"""

from .main import app  # noqa: F401
