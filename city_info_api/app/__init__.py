"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Each domain (cities, points of interest, files) exposes a
router defined in ``api/endpoints``; the routers are aggregated in
``api/router.py`` and mounted under ``/api``.
"""

from .main import app  # noqa: F401
