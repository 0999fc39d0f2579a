"""Unit tests for email transports.

Tests cover:
- StubEmailService: records and logs messages
- SmtpEmailService: MIME assembly, STARTTLS/login, send in a worker thread
"""

from unittest.mock import MagicMock, patch

import pytest

from src.domain.protocols.email_protocol import EmailMessage
from src.infrastructure.email import SmtpEmailService, StubEmailService


def make_message() -> EmailMessage:
    return EmailMessage(
        to="sam@example.com",
        subject="jane shared a new resource with you",
        text='New Resource: jane has shared "Workbook" with you.',
        html="<p>Workbook</p>",
    )


@pytest.mark.unit
class TestStubEmailService:
    @pytest.mark.asyncio
    async def test_send_records_and_logs(self):
        mock_logger = MagicMock()
        service = StubEmailService(logger=mock_logger)
        message = make_message()

        await service.send(message)

        assert service.sent == [message]
        mock_logger.info.assert_called_once_with(
            "email_stub_sent",
            recipient="sam@example.com",
            subject="jane shared a new resource with you",
        )


@pytest.mark.unit
class TestSmtpEmailService:
    def test_build_mime_has_text_and_html_parts(self):
        service = SmtpEmailService(
            logger=MagicMock(),
            host="smtp.example.com",
            port=587,
            from_address="notifications@loom.test",
        )

        mime = service.build_mime(make_message())

        assert mime["To"] == "sam@example.com"
        assert mime["From"] == "notifications@loom.test"
        assert mime["Subject"] == "jane shared a new resource with you"
        content_types = [part.get_content_type() for part in mime.get_payload()]
        assert content_types == ["text/plain", "text/html"]

    @pytest.mark.asyncio
    async def test_send_uses_starttls_and_login(self):
        mock_logger = MagicMock()
        service = SmtpEmailService(
            logger=mock_logger,
            host="smtp.example.com",
            port=587,
            from_address="notifications@loom.test",
            username="mailer",
            password="secret",
            use_tls=True,
        )

        with patch(
            "src.infrastructure.email.smtp_email_service.smtplib.SMTP"
        ) as mock_smtp:
            server = mock_smtp.return_value.__enter__.return_value

            await service.send(make_message())

        mock_smtp.assert_called_once_with("smtp.example.com", 587, timeout=10.0)
        server.starttls.assert_called_once()
        server.login.assert_called_once_with("mailer", "secret")
        sender, recipients, _body = server.sendmail.call_args.args
        assert sender == "notifications@loom.test"
        assert recipients == ["sam@example.com"]
        assert mock_logger.info.call_args.args[0] == "email_sent"

    @pytest.mark.asyncio
    async def test_send_without_tls_or_credentials(self):
        service = SmtpEmailService(
            logger=MagicMock(),
            host="localhost",
            port=1025,
            from_address="notifications@loom.test",
            use_tls=False,
        )

        with patch(
            "src.infrastructure.email.smtp_email_service.smtplib.SMTP"
        ) as mock_smtp:
            server = mock_smtp.return_value.__enter__.return_value

            await service.send(make_message())

        server.starttls.assert_not_called()
        server.login.assert_not_called()
        server.sendmail.assert_called_once()

    @pytest.mark.asyncio
    async def test_transport_error_propagates(self):
        mock_logger = MagicMock()
        service = SmtpEmailService(
            logger=mock_logger,
            host="smtp.example.com",
            port=587,
            from_address="notifications@loom.test",
        )

        with patch(
            "src.infrastructure.email.smtp_email_service.smtplib.SMTP",
            side_effect=OSError("connection refused"),
        ):
            with pytest.raises(OSError):
                await service.send(make_message())

        mock_logger.info.assert_not_called()
