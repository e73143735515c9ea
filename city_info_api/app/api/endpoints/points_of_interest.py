"""
Point of interest endpoints.

These routes provide CRUD operations for the points of interest of a
city.  Every route returns 404 when the city, or the addressed point
of interest, does not exist.  Partial updates accept a JSON Patch
document (``application/json-patch+json`` or ``application/json``).
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from city_info_api.app.core.errors import NotFoundError, PatchError
from city_info_api.app.schemas.point_of_interest import (
    PointOfInterestCreate,
    PointOfInterestRead,
    PointOfInterestUpdate,
)
from city_info_api.app.services.mail_service import MailService, get_mail_service
from city_info_api.app.services.point_of_interest_service import PointOfInterestService

router = APIRouter(prefix="/cities/{city_id}/pointsofinterest")


def _not_found(e: NotFoundError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get("", response_model=List[PointOfInterestRead])
async def list_points_of_interest(city_id: int) -> List[PointOfInterestRead]:
    """Return all points of interest of a city."""
    try:
        return await PointOfInterestService.list_points_of_interest(city_id)
    except NotFoundError as e:
        raise _not_found(e) from e


@router.get("/{point_of_interest_id}", response_model=PointOfInterestRead)
async def get_point_of_interest(city_id: int, point_of_interest_id: int) -> PointOfInterestRead:
    """Retrieve a single point of interest of a city."""
    try:
        return await PointOfInterestService.get_point_of_interest(city_id, point_of_interest_id)
    except NotFoundError as e:
        raise _not_found(e) from e


@router.post("", response_model=PointOfInterestRead, status_code=status.HTTP_201_CREATED)
async def create_point_of_interest(
    city_id: int,
    point_of_interest: PointOfInterestCreate,
    request: Request,
    response: Response,
) -> PointOfInterestRead:
    """Create a point of interest.

    The ``Location`` header of the response points at the new resource.
    """
    try:
        created = await PointOfInterestService.create_point_of_interest(city_id, point_of_interest)
    except NotFoundError as e:
        raise _not_found(e) from e
    response.headers["Location"] = str(
        request.url_for(
            "get_point_of_interest",
            city_id=city_id,
            point_of_interest_id=created.id,
        )
    )
    return created


@router.put("/{point_of_interest_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_point_of_interest(
    city_id: int,
    point_of_interest_id: int,
    point_of_interest: PointOfInterestUpdate,
) -> None:
    """Replace the name and description of a point of interest."""
    try:
        await PointOfInterestService.update_point_of_interest(city_id, point_of_interest_id, point_of_interest)
    except NotFoundError as e:
        raise _not_found(e) from e
    return None


@router.patch(
    "/{point_of_interest_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json-patch+json": {
                    "schema": {"type": "array", "items": {"type": "object"}},
                    "example": [{"op": "replace", "path": "/name", "value": "Updated - Central Park"}],
                },
            },
        },
    },
)
async def partially_update_point_of_interest(
    city_id: int,
    point_of_interest_id: int,
    request: Request,
) -> None:
    """Apply a JSON Patch document to a point of interest.

    The body is read directly so that unparseable JSON is reported as
    400 like every other malformed document.  Returns 400 with the list
    of errors if the document cannot be applied or the patched point of
    interest fails validation.
    """
    try:
        patch_document = await request.json()
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=[{"loc": ["body"], "msg": f"Patch document is not valid JSON: {e}", "type": "json_patch"}],
        ) from e
    try:
        await PointOfInterestService.patch_point_of_interest(city_id, point_of_interest_id, patch_document)
    except NotFoundError as e:
        raise _not_found(e) from e
    except PatchError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.errors) from e
    return None


@router.delete("/{point_of_interest_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_point_of_interest(
    city_id: int,
    point_of_interest_id: int,
    mail_service: MailService = Depends(get_mail_service),
) -> None:
    """Delete a point of interest and notify by mail."""
    try:
        await PointOfInterestService.delete_point_of_interest(city_id, point_of_interest_id, mail_service)
    except NotFoundError as e:
        raise _not_found(e) from e
    return None
