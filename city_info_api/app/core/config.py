"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API can be started without any configuration at all.
"""

import os
from dataclasses import dataclass


def _as_bool(value: str) -> bool:
    return value.lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "City Info API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _as_bool(os.getenv("DEBUG", "true"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Path of a log file.  Empty means console logging only.  The file
    # is rotated daily, e.g. LOG_FILE="logs/cityinfo.txt".
    log_file: str = os.getenv("LOG_FILE", "")
    log_backup_count: int = int(os.getenv("LOG_BACKUP_COUNT", "7"))

    # Expose the interactive OpenAPI documentation under /docs.
    enable_docs: bool = _as_bool(os.getenv("ENABLE_DOCS", "true"))

    # The single file served by the files endpoint.  A relative path is
    # resolved against the ``city_info_api`` package directory by the
    # file service.
    download_file: str = os.getenv("DOWNLOAD_FILE", "static/HttpMethods.png")

    # Addresses used by the mail services when a notification is sent.
    mail_to: str = os.getenv("MAIL_TO", "admin@mycompany.com")
    mail_from: str = os.getenv("MAIL_FROM", "noreply@mycompany.com")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
