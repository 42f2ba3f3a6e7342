import logging

from src.app.services.mailer import Mailer, MailReceipt

logger = logging.getLogger(__name__)


class ConsoleMailer(Mailer):
    """Development mailer: writes messages to the log instead of sending them."""

    async def send(self, to: str, subject: str, text: str, html: str = "") -> MailReceipt:
        logger.info(f"[mail] To: {to} | Subject: {subject}\n{text}")
        return MailReceipt(accepted=[to])
