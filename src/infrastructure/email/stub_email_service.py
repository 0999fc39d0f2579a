"""Stub email service for development and tests.

Logs each message instead of sending it. Selected with
``EMAIL_BACKEND=stub`` (the default).
"""

from src.domain.protocols.email_protocol import EmailMessage
from src.domain.protocols.logger_protocol import LoggerProtocol


class StubEmailService:
    """EmailProtocol adapter that only logs.

    Attributes:
        sent: Messages "sent" so far, in order. Lets tests inspect output.
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger
        self.sent: list[EmailMessage] = []

    async def send(self, message: EmailMessage) -> None:
        self.sent.append(message)
        self._logger.info(
            "email_stub_sent",
            recipient=message.to,
            subject=message.subject,
        )
