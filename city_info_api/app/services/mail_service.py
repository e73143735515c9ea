"""
Notification mail services.

Two implementations share the same ``send`` interface: the local one is
used while developing (``DEBUG`` enabled) and the cloud one otherwise.
Neither delivers real mail; both write the message to the log.  Route
handlers obtain an instance through the ``get_mail_service``
dependency, which tests can override.
"""

import logging
from typing import Optional

from ..core.config import settings


class MailService:
    """Base class for mail senders."""

    def __init__(self, mail_to: Optional[str] = None, mail_from: Optional[str] = None) -> None:
        self.mail_to = mail_to or settings.mail_to
        self.mail_from = mail_from or settings.mail_from

    def send(self, subject: str, message: str) -> None:
        logger = logging.getLogger(__name__)
        logger.info(
            "Mail from %s to %s, with %s.",
            self.mail_from,
            self.mail_to,
            type(self).__name__,
        )
        logger.info("Subject: %s", subject)
        logger.info("Message: %s", message)


class LocalMailService(MailService):
    """Mail sender used in development."""


class CloudMailService(MailService):
    """Mail sender used in deployed environments."""


def get_mail_service() -> MailService:
    """FastAPI dependency returning the mail service for this environment."""
    if settings.debug:
        return LocalMailService()
    return CloudMailService()
