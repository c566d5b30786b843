"""
Endpoint modules.

Each module defines an ``APIRouter`` for one area of the portal.  The
routers are aggregated in ``api/router.py`` and included by the app.
"""
