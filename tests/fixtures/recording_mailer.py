import re
from dataclasses import dataclass
from typing import List

from src.app.services.mailer import MailDeliveryError, Mailer, MailReceipt


@dataclass
class SentMail:
    to: str
    subject: str
    text: str
    html: str


class RecordingMailer(Mailer):
    """Keeps every message in memory; set fail=True to simulate a dead SMTP server"""

    def __init__(self):
        self.outbox: List[SentMail] = []
        self.fail = False

    async def send(self, to: str, subject: str, text: str, html: str = "") -> MailReceipt:
        if self.fail:
            raise MailDeliveryError("Connection refused")
        self.outbox.append(SentMail(to, subject, text, html))
        return MailReceipt(accepted=[to])

    def last_to(self, to: str) -> SentMail:
        return [mail for mail in self.outbox if mail.to == to][-1]

    def verification_token(self, to: str) -> str:
        return self.last_to(to).text.rsplit("/", 1)[-1]

    def code(self, to: str) -> str:
        return re.search(r"\b\d{6}\b", self.last_to(to).text).group(0)
