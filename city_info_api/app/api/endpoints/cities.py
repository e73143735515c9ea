"""
City endpoints.

Cities are read-only: the API lists them and returns a single city by
id, including its nested points of interest.
"""

from typing import List

from fastapi import APIRouter, HTTPException, status

from city_info_api.app.core.errors import NotFoundError
from city_info_api.app.schemas.city import CityRead
from city_info_api.app.services.city_service import CityService

router = APIRouter()


@router.get("", response_model=List[CityRead])
async def list_cities() -> List[CityRead]:
    """Return all cities."""
    return await CityService.list_cities()


@router.get("/{city_id}", response_model=CityRead)
async def get_city(city_id: int) -> CityRead:
    """Retrieve a single city by its ID.

    Raises 404 if the city is not found.
    """
    try:
        return await CityService.get_city(city_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
