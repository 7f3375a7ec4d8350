"""
Endpoint modules.

Each module defines an APIRouter for one page (catalog, details,
comparison).  The routers are aggregated in ``router.py``.
"""
