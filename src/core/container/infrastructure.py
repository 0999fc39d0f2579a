"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Database (PostgreSQL / SQLite)
- Email (stub/SMTP)
- Logging (console, human-readable or JSON)
"""

from contextlib import asynccontextmanager
from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import get_settings
from src.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from src.domain.protocols.email_protocol import EmailProtocol
    from src.domain.protocols.logger_protocol import LoggerProtocol


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Returns:
        Database manager instance.

    Note:
        Prefer get_db_session() for a transactional session.
    """
    settings = get_settings()
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


@asynccontextmanager
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Transactional session from the shared Database.

    Commits on success, rolls back on exception, always closes.

    Usage:
        async with get_db_session() as session:
            handler = get_log_session_handler(session)
            result = await handler.handle(cmd)
    """
    async with get_database().get_session() as session:
        yield session


@lru_cache()
def get_email_service() -> "EmailProtocol":
    """Get email service singleton (app-scoped).

    Adapter is chosen by EMAIL_BACKEND:
        - 'stub': StubEmailService (logs messages)
        - 'smtp': SmtpEmailService (requires SMTP_HOST; Settings rejects
          the combination without it at startup)

    Returns:
        Email service implementing EmailProtocol.
    """
    from src.infrastructure.email import SmtpEmailService, StubEmailService

    settings = get_settings()

    if settings.uses_smtp:
        return SmtpEmailService(
            logger=get_logger(),
            host=settings.smtp_host or "",
            port=settings.smtp_port,
            from_address=settings.email_from,
            username=settings.smtp_user,
            password=settings.smtp_password,
            use_tls=settings.smtp_use_tls,
        )
    return StubEmailService(logger=get_logger())


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    return ConsoleAdapter(
        use_json=not settings.is_development,
        level=settings.log_level,
    )
