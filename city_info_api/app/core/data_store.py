"""
In-memory data store for cities.

``CitiesDataStore`` holds a process-wide list of cities that is seeded
with sample data when first accessed.  Services mutate the records in
place; nothing is persisted, so all changes are lost when the process
exits.  Use ``CitiesDataStore.current()`` to obtain the shared
instance and ``reset()`` to restore the seed data.
"""

import logging
from typing import List, Optional

from ..schemas.city import CityRead
from ..schemas.point_of_interest import PointOfInterestRead

logger = logging.getLogger(__name__)


def _seed_cities() -> List[CityRead]:
    return [
        CityRead(
            id=1,
            name="New York City",
            description="The one with that big park.",
            points_of_interest=[
                PointOfInterestRead(
                    id=1,
                    name="Central Park",
                    description="The most visited urban park in the United States.",
                ),
                PointOfInterestRead(
                    id=2,
                    name="Empire State Building",
                    description="A 102-story skyscraper located in Midtown Manhattan.",
                ),
            ],
        ),
        CityRead(
            id=2,
            name="Antwerp",
            description="The one with the cathedral that was never really finished.",
            points_of_interest=[
                PointOfInterestRead(
                    id=3,
                    name="Cathedral of Our Lady",
                    description="A Gothic style cathedral, conceived by architects Jan and Pieter Appelmans.",
                ),
                PointOfInterestRead(
                    id=4,
                    name="Antwerp Central Station",
                    description="The finest example of railway architecture in Belgium.",
                ),
            ],
        ),
    ]


class CitiesDataStore:
    """Process-wide collection of cities."""

    _current: Optional["CitiesDataStore"] = None

    def __init__(self) -> None:
        self.cities: List[CityRead] = _seed_cities()

    @classmethod
    def current(cls) -> "CitiesDataStore":
        """Return the shared store, creating it on first use."""
        if cls._current is None:
            cls._current = cls()
            logger.debug("Seeded data store with %d cities", len(cls._current.cities))
        return cls._current

    def reset(self) -> None:
        """Discard all changes and restore the seed data."""
        self.cities = _seed_cities()

    def find_city(self, city_id: int) -> Optional[CityRead]:
        return next((city for city in self.cities if city.id == city_id), None)

    def max_point_of_interest_id(self) -> int:
        """Highest point of interest id across all cities, 0 if there is none."""
        return max(
            (poi.id for city in self.cities for poi in city.points_of_interest),
            default=0,
        )
