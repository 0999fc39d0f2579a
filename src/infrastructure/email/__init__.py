"""Email service implementations.

This package contains email transport adapters and content templates:
- StubEmailService: Logs messages (development/testing)
- SmtpEmailService: Sends through an SMTP server
- rendering: Jinja2-backed functions rendering notification emails
"""

from src.infrastructure.email.smtp_email_service import SmtpEmailService
from src.infrastructure.email.stub_email_service import StubEmailService

__all__ = [
    "SmtpEmailService",
    "StubEmailService",
]
