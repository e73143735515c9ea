"""
Business logic for file downloads.

The API exposes exactly one downloadable file, configured through
``settings.download_file``.  The requested file identifier is not used
to select the file.
"""

import logging
import mimetypes
import os
from pathlib import Path
from typing import NamedTuple

from ..core.config import settings
from ..core.errors import NotFoundError


class DownloadFile(NamedTuple):
    path: Path
    media_type: str
    filename: str


def get_download_path() -> Path:
    """Compute the path of the downloadable file.

    If ``settings.download_file`` is an absolute path, use it directly.
    Otherwise resolve it relative to the ``city_info_api`` package.
    """
    configured = settings.download_file
    if os.path.isabs(configured):
        return Path(configured)
    base_dir = Path(__file__).resolve().parent.parent.parent  # city_info_api/
    return (base_dir / configured).resolve()


class FileService:
    """Service for serving the downloadable file."""

    @classmethod
    async def get_file(cls, file_id: str) -> DownloadFile:
        """Describe the file to send for ``file_id``.

        Raises ``NotFoundError`` if the configured file is missing.
        """
        logger = logging.getLogger(__name__)
        path = get_download_path()
        if not path.is_file():
            logger.warning("Download file %s does not exist", path)
            raise NotFoundError("File not found")
        media_type, _ = mimetypes.guess_type(str(path))
        logger.debug("Serving %s for requested file id %s", path.name, file_id)
        return DownloadFile(
            path=path,
            media_type=media_type or "application/octet-stream",
            filename=path.name,
        )
