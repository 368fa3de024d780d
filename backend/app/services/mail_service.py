"""
City Info Backend — Mail Notification Stub
============================================

What:  Fire-and-forget notification sent after a point of interest is deleted.
Why:   The delete endpoint depends on the abstract MailService only, so the
       concrete service can be swapped by configuration or in tests.
How:   Both implementations "send" by logging the envelope; no transport is
       involved.

Selection (settings.mail_service):
    local → LocalMailService  (fixed development addresses)
    cloud → CloudMailService  (addresses from MAIL_TO_ADDRESS / MAIL_FROM_ADDRESS)
"""

import logging
from abc import ABC, abstractmethod

from app.config import settings

logger = logging.getLogger(__name__)


class MailService(ABC):
    """Interface for notification senders."""

    mail_to: str
    mail_from: str

    @abstractmethod
    def send(self, subject: str, message: str) -> None:
        """Send a notification. Must not raise for delivery problems."""


class LocalMailService(MailService):

    def __init__(self) -> None:
        self.mail_to = "admin@mycompany.com"
        self.mail_from = "noreply@mycompany.com"

    def send(self, subject: str, message: str) -> None:
        logger.info(
            "Mail from %s to %s, with %s. Subject: %s. Message: %s",
            self.mail_from,
            self.mail_to,
            type(self).__name__,
            subject,
            message,
        )


class CloudMailService(MailService):

    def __init__(self, mail_to: str, mail_from: str) -> None:
        self.mail_to = mail_to
        self.mail_from = mail_from

    def send(self, subject: str, message: str) -> None:
        logger.info(
            "Mail from %s to %s, with %s. Subject: %s. Message: %s",
            self.mail_from,
            self.mail_to,
            type(self).__name__,
            subject,
            message,
        )


def get_mail_service() -> MailService:
    """FastAPI dependency returning the configured mail service."""
    if settings.mail_service == "cloud":
        return CloudMailService(
            mail_to=settings.mail_to_address,
            mail_from=settings.mail_from_address,
        )
    return LocalMailService()
