"""Entry point for the City Info API.

This script serves the FastAPI application with uvicorn.  It is
intended to be executed from the project root, for example under
Docker, where you only specify a single Python file to run.

Host and port are read from the ``HOST`` and ``PORT`` environment
variables (defaults ``0.0.0.0`` and ``8000``); see
``city_info_api/app/core/config.py`` for all supported variables.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from city_info_api.app.core.config import settings
from city_info_api.app.main import app


async def run_api() -> None:
    """Start the API using Uvicorn."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


async def main() -> None:
    try:
        await run_api()
    except Exception:
        logging.exception("Exception in service")
        raise


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
