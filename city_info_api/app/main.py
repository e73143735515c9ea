"""
Main entrypoint for the City Info API.

This module assembles the FastAPI application, sets up logging,
registers exception handlers and includes the API router.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Run it with uvicorn,
e.g.::

    uvicorn city_info_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from .core.config import settings
from .core.data_store import CitiesDataStore
from .core.logging_config import setup_logging
from .api.router import router as api_router


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Configures logging, registers a catch-all exception handler and
    mounts the API routes under ``/api``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the setup below
    # can safely log messages.
    setup_logging(settings.log_level, settings.log_file or None, settings.log_backup_count)
    logger = logging.getLogger(__name__)

    docs_url = "/docs" if settings.enable_docs else None
    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        docs_url=docs_url,
        redoc_url=None,
    )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "Unhandled exception while handling %s %s",
            request.method,
            request.url.path,
            exc_info=exc,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "A problem happened while handling your request."},
        )

    app.include_router(api_router, prefix="/api")

    @app.on_event("startup")
    async def startup_event() -> None:
        store = CitiesDataStore.current()
        logger.info("Serving %d cities from the in-memory store", len(store.cities))

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
