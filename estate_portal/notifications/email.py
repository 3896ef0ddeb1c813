"""Outbound email delivery.

The SMTP backend hands the message to the configured relay; the console
backend only logs it, which is what local development uses.
"""
import logging
import smtplib
from dataclasses import dataclass
from email.message import EmailMessage
from typing import Optional

from starlette.concurrency import run_in_threadpool

from estate_portal.config import settings

logger = logging.getLogger(__name__)


class EmailDeliveryError(Exception):
    pass


@dataclass
class OutgoingEmail:
    to: str
    subject: str
    html: str
    text: Optional[str] = None


class EmailNotifier:
    async def send(self, message: OutgoingEmail) -> None:
        raise NotImplementedError


class ConsoleEmailNotifier(EmailNotifier):
    async def send(self, message: OutgoingEmail) -> None:
        logger.info(f"EMAIL [{settings.SMTP_FROM} -> {message.to}] {message.subject}\n{message.text or message.html}")


class SmtpEmailNotifier(EmailNotifier):
    def __init__(
        self,
        host: str,
        port: int,
        username: Optional[str] = None,
        password: Optional[str] = None,
        sender: str = settings.SMTP_FROM,
        use_tls: bool = True,
        timeout: float = 30.0,
    ):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.sender = sender
        self.use_tls = use_tls
        self.timeout = timeout

    def _build(self, message: OutgoingEmail) -> EmailMessage:
        msg = EmailMessage()
        msg["Subject"] = message.subject
        msg["From"] = self.sender
        msg["To"] = message.to
        msg.set_content(message.text or "This message requires an HTML-capable email client.")
        msg.add_alternative(message.html, subtype="html")
        return msg

    def _deliver(self, message: OutgoingEmail) -> None:
        with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as smtp:
            if self.use_tls:
                smtp.starttls()
            if self.username:
                smtp.login(self.username, self.password or "")
            smtp.send_message(self._build(message))

    async def send(self, message: OutgoingEmail) -> None:
        try:
            await run_in_threadpool(self._deliver, message)
        except (smtplib.SMTPException, OSError) as e:
            raise EmailDeliveryError(str(e)) from e


def build_notifier() -> EmailNotifier:
    if settings.EMAIL_BACKEND == "console":
        return ConsoleEmailNotifier()
    return SmtpEmailNotifier(
        host=settings.SMTP_HOST,
        port=settings.SMTP_PORT,
        username=settings.SMTP_USER,
        password=settings.SMTP_PASSWORD,
        sender=settings.SMTP_FROM,
        use_tls=settings.SMTP_USE_TLS,
        timeout=settings.SMTP_TIMEOUT_SECONDS,
    )


# Dependency
def get_notifier() -> EmailNotifier:
    return build_notifier()
