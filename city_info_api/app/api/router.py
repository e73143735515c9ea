"""
Top-level API router.

This router aggregates the domain-specific routers under a unified
prefix.  When new endpoints are added, update this file to include
their routers.  The JSON resource routers refuse clients that do not
accept JSON; the files router serves raw bytes and is exempt.
"""

from fastapi import APIRouter, Depends

from .dependencies import require_json_accept
from .endpoints import cities, files, points_of_interest

router = APIRouter()

router.include_router(
    cities.router,
    prefix="/cities",
    tags=["cities"],
    dependencies=[Depends(require_json_accept)],
)
# Points of interest are nested below a city; the router defines the
# full "/cities/{city_id}/pointsofinterest" path itself.
router.include_router(
    points_of_interest.router,
    tags=["points of interest"],
    dependencies=[Depends(require_json_accept)],
)
router.include_router(files.router, prefix="/files", tags=["files"])
