"""
Business logic for cities.

Cities are read-only through the API: they can be listed and fetched
by id.  Lookups are linear scans over the in-memory store.
"""

import logging
from typing import List

from ..core.data_store import CitiesDataStore
from ..core.errors import NotFoundError
from ..schemas.city import CityRead


class CityService:
    """Service for reading cities."""

    @classmethod
    async def list_cities(cls) -> List[CityRead]:
        """Return all cities with their points of interest."""
        return list(CitiesDataStore.current().cities)

    @classmethod
    async def get_city(cls, city_id: int) -> CityRead:
        """Return a single city or raise ``NotFoundError``."""
        city = CitiesDataStore.current().find_city(city_id)
        if city is None:
            logging.getLogger(__name__).info("City with id %s wasn't found", city_id)
            raise NotFoundError(f"City {city_id} not found")
        return city
