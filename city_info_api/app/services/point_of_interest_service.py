"""
Business logic for points of interest.

Points of interest live inside their city's list in the in-memory
store and are mutated in place.  New ids are assigned as the highest
id across *all* cities plus one.  Partial updates are expressed as
JSON Patch documents (RFC 6902): the stored point is materialized as a
``PointOfInterestUpdate``, the patch is applied, the result is
re-validated and only then copied back to the store.
"""

import logging
from typing import Any, Dict, List

import jsonpatch
from pydantic import ValidationError

from ..core.data_store import CitiesDataStore
from ..core.errors import NotFoundError, PatchError
from ..schemas.city import CityRead
from ..schemas.point_of_interest import (
    PointOfInterestCreate,
    PointOfInterestRead,
    PointOfInterestUpdate,
)
from .mail_service import MailService


class PointOfInterestService:
    """Service for managing points of interest within a city."""

    @staticmethod
    def _get_city(city_id: int) -> CityRead:
        city = CitiesDataStore.current().find_city(city_id)
        if city is None:
            logging.getLogger(__name__).info(
                "City with id %s wasn't found when accessing points of interest", city_id
            )
            raise NotFoundError(f"City {city_id} not found")
        return city

    @staticmethod
    def _find(city: CityRead, point_of_interest_id: int) -> PointOfInterestRead:
        for point in city.points_of_interest:
            if point.id == point_of_interest_id:
                return point
        logging.getLogger(__name__).info(
            "Point of interest with id %s wasn't found in city %s", point_of_interest_id, city.id
        )
        raise NotFoundError(f"Point of interest {point_of_interest_id} not found")

    @classmethod
    async def list_points_of_interest(cls, city_id: int) -> List[PointOfInterestRead]:
        """Return the points of interest of a city."""
        return list(cls._get_city(city_id).points_of_interest)

    @classmethod
    async def get_point_of_interest(cls, city_id: int, point_of_interest_id: int) -> PointOfInterestRead:
        """Return a single point of interest of a city."""
        city = cls._get_city(city_id)
        return cls._find(city, point_of_interest_id)

    @classmethod
    async def create_point_of_interest(cls, city_id: int, data: PointOfInterestCreate) -> PointOfInterestRead:
        """Append a new point of interest to a city and return it."""
        logger = logging.getLogger(__name__)
        city = cls._get_city(city_id)
        new_id = CitiesDataStore.current().max_point_of_interest_id() + 1
        point = PointOfInterestRead(id=new_id, name=data.name, description=data.description)
        city.points_of_interest.append(point)
        logger.info("Created point of interest %s in city %s", new_id, city_id)
        return point

    @classmethod
    async def update_point_of_interest(
        cls,
        city_id: int,
        point_of_interest_id: int,
        data: PointOfInterestUpdate,
    ) -> PointOfInterestRead:
        """Replace name and description of an existing point of interest."""
        logger = logging.getLogger(__name__)
        point = cls._find(cls._get_city(city_id), point_of_interest_id)
        point.name = data.name
        point.description = data.description
        logger.info("Updated point of interest %s in city %s", point_of_interest_id, city_id)
        return point

    @classmethod
    async def patch_point_of_interest(
        cls,
        city_id: int,
        point_of_interest_id: int,
        patch_document: Any,
    ) -> PointOfInterestRead:
        """Apply a JSON Patch document to a point of interest.

        Raises ``PatchError`` with the collected errors if the document
        is malformed, an operation fails, or the patched representation
        does not validate.  The stored point is left untouched in that
        case.
        """
        logger = logging.getLogger(__name__)
        point = cls._find(cls._get_city(city_id), point_of_interest_id)

        if not isinstance(patch_document, list) or not all(isinstance(op, dict) for op in patch_document):
            raise PatchError([
                {
                    "loc": ["body"],
                    "msg": "Patch document must be a list of operation objects",
                    "type": "json_patch",
                }
            ])

        to_patch: Dict[str, Any] = PointOfInterestUpdate.model_construct(
            name=point.name, description=point.description
        ).model_dump()
        try:
            patched = jsonpatch.apply_patch(to_patch, patch_document)
        except (jsonpatch.JsonPatchException, jsonpatch.JsonPointerException) as exc:
            logger.info("Rejected patch for point of interest %s: %s", point_of_interest_id, exc)
            raise PatchError([{"loc": ["body"], "msg": str(exc), "type": "json_patch"}]) from exc

        try:
            validated = PointOfInterestUpdate.model_validate(patched)
        except ValidationError as exc:
            errors = [
                {"loc": list(error["loc"]), "msg": error["msg"], "type": error["type"]}
                for error in exc.errors()
            ]
            logger.info("Patched point of interest %s is invalid: %s", point_of_interest_id, errors)
            raise PatchError(errors) from exc

        point.name = validated.name
        point.description = validated.description
        logger.info("Patched point of interest %s in city %s", point_of_interest_id, city_id)
        return point

    @classmethod
    async def delete_point_of_interest(
        cls,
        city_id: int,
        point_of_interest_id: int,
        mail_service: MailService,
    ) -> None:
        """Remove a point of interest and send a notification about it."""
        logger = logging.getLogger(__name__)
        city = cls._get_city(city_id)
        point = cls._find(city, point_of_interest_id)
        city.points_of_interest.remove(point)
        logger.info("Deleted point of interest %s from city %s", point_of_interest_id, city_id)
        mail_service.send(
            "Point of interest deleted.",
            f"Point of interest {point.name} with id {point.id} was deleted.",
        )
