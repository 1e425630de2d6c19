import asyncio
import logging
import smtplib
import ssl
from email.message import EmailMessage

from src.app.services.notifier import INotifier

logger = logging.getLogger(__name__)


class SmtpNotifier(INotifier):
    """Sends plain text mail through an SMTP relay"""

    def __init__(
        self,
        host: str,
        port: int,
        mail_from: str,
        from_name: str = "",
        user: str = "",
        password: str = "",
        starttls: bool = True,
        timeout: float = 15,
    ):
        self.host = host
        self.port = port
        self.mail_from = mail_from
        self.from_name = from_name
        self.user = user
        self.password = password
        self.starttls = starttls
        self.timeout = timeout

    def _create_message(self, to_address: str, subject: str, body: str) -> EmailMessage:
        msg = EmailMessage()
        msg["Subject"] = subject
        msg["From"] = f"{self.from_name} <{self.mail_from}>" if self.from_name else self.mail_from
        msg["To"] = to_address
        msg.set_content(body)
        return msg

    def _send_message(self, message: EmailMessage) -> None:
        with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as server:
            if self.starttls:
                server.starttls(context=ssl.create_default_context())
            if self.user:
                server.login(self.user, self.password)
            server.send_message(message)

    async def send(self, to_address: str, subject: str, body: str) -> None:
        message = self._create_message(to_address, subject, body)
        # smtplib blocks, keep it off the event loop
        await asyncio.to_thread(self._send_message, message)
        logger.info("Email sent to %s", to_address)
