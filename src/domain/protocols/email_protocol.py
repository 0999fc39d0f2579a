"""EmailProtocol - Port for email transport implementations.

Infrastructure provides StubEmailService (logs only) and SmtpEmailService.
"""

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True, slots=True, kw_only=True)
class EmailMessage:
    """Rendered email ready for delivery.

    Attributes:
        to: Recipient address.
        subject: Subject line.
        text: Plain-text body.
        html: HTML body.
    """

    to: str
    subject: str
    text: str
    html: str


class EmailProtocol(Protocol):
    """Email transport protocol (port).

    Example Implementation:
        >>> class StubEmailService:
        ...     async def send(self, message: EmailMessage) -> None:
        ...         logger.info("email_stub_sent", to=message.to)
    """

    async def send(self, message: EmailMessage) -> None:
        """Deliver one message.

        Raises:
            Exception: Transport failures propagate; delivery handlers catch
                and log them.
        """
        ...
