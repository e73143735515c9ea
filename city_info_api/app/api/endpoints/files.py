"""
File download endpoint.

Serves the one downloadable file configured in settings.  The
``file_id`` path parameter is accepted but does not select the file.
"""

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import FileResponse

from city_info_api.app.core.errors import NotFoundError
from city_info_api.app.services.file_service import FileService

router = APIRouter()


@router.get("/{file_id}", response_class=FileResponse)
async def get_file(file_id: str) -> FileResponse:
    """Download the configured file with an inferred content type."""
    try:
        download = await FileService.get_file(file_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return FileResponse(
        download.path,
        media_type=download.media_type,
        filename=download.filename,
    )
