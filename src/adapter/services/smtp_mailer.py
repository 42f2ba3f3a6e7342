"""
SMTP mail adapter.

smtplib is blocking, so each send runs in a worker thread.
"""

import asyncio
import logging
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

from src.app.services.mailer import MailDeliveryError, Mailer, MailReceipt

logger = logging.getLogger(__name__)


class SmtpMailer(Mailer):
    def __init__(
        self,
        host: str,
        port: int,
        sender: str,
        username: str = "",
        password: str = "",
        use_tls: bool = True,
        timeout: int = 10,
    ):
        self.host = host
        self.port = port
        self.sender = sender
        self.username = username
        self.password = password
        self.use_tls = use_tls
        self.timeout = timeout

    def _build_message(self, to: str, subject: str, text: str, html: str) -> MIMEMultipart:
        msg = MIMEMultipart("alternative")
        msg["From"] = self.sender
        msg["To"] = to
        msg["Subject"] = subject
        msg.attach(MIMEText(text, "plain"))
        if html:
            msg.attach(MIMEText(html, "html"))
        return msg

    def _send_sync(self, to: str, msg: MIMEMultipart) -> MailReceipt:
        try:
            with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as server:
                if self.use_tls:
                    server.starttls()
                if self.username:
                    server.login(self.username, self.password)
                refused = server.sendmail(self.sender, [to], msg.as_string())
        except smtplib.SMTPRecipientsRefused as exc:
            return MailReceipt(rejected=list(exc.recipients.keys()))
        except (smtplib.SMTPException, OSError) as exc:
            raise MailDeliveryError(str(exc)) from exc

        rejected = list(refused.keys())
        accepted = [] if to in refused else [to]
        return MailReceipt(accepted=accepted, rejected=rejected)

    async def send(self, to: str, subject: str, text: str, html: str = "") -> MailReceipt:
        msg = self._build_message(to, subject, text, html)
        receipt = await asyncio.to_thread(self._send_sync, to, msg)
        logger.info(f"Mail '{subject}' sent to {to} via {self.host}:{self.port}")
        return receipt
