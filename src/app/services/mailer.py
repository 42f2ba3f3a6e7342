"""
Mailer port

Outgoing mail is a collaborator of the account use cases. Adapters live in
src/adapter/services.
"""

import logging
from abc import ABC, abstractmethod
from typing import List

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class MailDeliveryError(Exception):
    """Transport-level failure (connection, auth, protocol)"""


class MailReceipt(BaseModel):
    """Outcome of a send: addresses the server refused"""

    accepted: List[str] = Field(default_factory=list)
    rejected: List[str] = Field(default_factory=list)


class Mailer(ABC):
    @abstractmethod
    async def send(self, to: str, subject: str, text: str, html: str = "") -> MailReceipt:
        """
        Send a message to a single recipient.

        Raises:
            MailDeliveryError: the message could not be handed to the server
        """
        pass

    async def deliver(self, to: str, subject: str, text: str, html: str = "") -> bool:
        """Send and report whether every recipient was accepted."""
        try:
            receipt = await self.send(to, subject, text, html)
        except MailDeliveryError as exc:
            logger.error(f"Mail delivery to {to} failed: {exc}")
            return False

        if receipt.rejected:
            logger.warning(f"Mail rejected for recipients: {receipt.rejected}")
            return False
        return True
