"""
Top‑level package for the City Info API.

This file makes ``city_info_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``city_info_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.  Static assets served by the API live in
``static/``.
"""

__all__ = []
