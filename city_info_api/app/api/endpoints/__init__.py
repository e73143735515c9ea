"""
Endpoint subpackage.

Each module in this package defines an APIRouter for a specific
domain (cities, points of interest, files).  The routers are
aggregated in ``api/router.py``.
"""
