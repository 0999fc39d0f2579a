"""SMTP email service.

Sends multipart (plain text + HTML) messages with ``smtplib``. The blocking
SMTP conversation runs in a worker thread so the event loop keeps serving
other handlers.

Configuration (Settings):
    smtp_host, smtp_port, smtp_user, smtp_password, smtp_use_tls, email_from
"""

import asyncio
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

from src.domain.protocols.email_protocol import EmailMessage
from src.domain.protocols.logger_protocol import LoggerProtocol


class SmtpEmailService:
    """EmailProtocol adapter backed by an SMTP server.

    Failures (connection, auth, refused recipient) propagate to the caller;
    the delivery handler logs them.
    """

    def __init__(
        self,
        logger: LoggerProtocol,
        host: str,
        port: int,
        from_address: str,
        username: str | None = None,
        password: str | None = None,
        use_tls: bool = True,
        timeout: float = 10.0,
    ) -> None:
        self._logger = logger
        self._host = host
        self._port = port
        self._from_address = from_address
        self._username = username
        self._password = password
        self._use_tls = use_tls
        self._timeout = timeout

    async def send(self, message: EmailMessage) -> None:
        await asyncio.to_thread(self._send_sync, message)
        self._logger.info(
            "email_sent",
            recipient=message.to,
            subject=message.subject,
            smtp_host=self._host,
        )

    def build_mime(self, message: EmailMessage) -> MIMEMultipart:
        mime = MIMEMultipart("alternative")
        mime["Subject"] = message.subject
        mime["From"] = self._from_address
        mime["To"] = message.to
        mime.attach(MIMEText(message.text, "plain", "utf-8"))
        mime.attach(MIMEText(message.html, "html", "utf-8"))
        return mime

    def _send_sync(self, message: EmailMessage) -> None:
        mime = self.build_mime(message)
        with smtplib.SMTP(self._host, self._port, timeout=self._timeout) as server:
            if self._use_tls:
                server.starttls()
            if self._username and self._password:
                server.login(self._username, self._password)
            server.sendmail(self._from_address, [message.to], mime.as_string())
