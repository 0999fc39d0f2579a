# mypy: disable-error-code="arg-type,call-overload"
"""Event bus dependency factory.

Application-scoped singleton for notification events. Delivery handlers are
subscribed at startup from NOTIFICATION_REGISTRY: for every kind the
handler method ``handle_{kind}`` is looked up on each channel handler the
metadata requires.

Tests build their own ``InMemoryEventBus`` instances; ``reset_event_bus``
drops the singleton so the next ``get_event_bus`` call wires a fresh one.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.domain.protocols.event_bus_protocol import EventBusProtocol


@lru_cache()
def get_event_bus() -> "EventBusProtocol":
    """Get event bus singleton (app-scoped).

    Wiring per channel, over the kinds ``get_kinds_for_channel`` returns:
        1. Email kinds -> EmailNotificationHandler.handle_{kind}
        2. In-app kinds -> InAppNotificationHandler.handle_{kind}

    Strict mode (EVENTS_STRICT_MODE, default on) raises on a missing handler
    method; graceful mode logs a warning and skips it.

    Returns:
        Event bus implementing EventBusProtocol.

    Raises:
        RuntimeError: Strict mode and a required handler method is missing.
    """
    from src.core.config import get_settings
    from src.core.container.infrastructure import (
        get_database,
        get_email_service,
        get_logger,
    )
    from src.domain.enums import NotificationChannel
    from src.domain.events.registry import get_kinds_for_channel, get_metadata
    from src.infrastructure.events.handlers import (
        EmailNotificationHandler,
        InAppNotificationHandler,
    )
    from src.infrastructure.events.in_memory_event_bus import InMemoryEventBus

    settings = get_settings()
    logger = get_logger()

    event_bus = InMemoryEventBus(logger=logger)

    email_handler = EmailNotificationHandler(
        database=get_database(),
        email_service=get_email_service(),
        logger=logger,
        settings=settings,
    )
    in_app_handler = InAppNotificationHandler(database=get_database(), logger=logger)

    for channel, channel_handler in (
        (NotificationChannel.EMAIL, email_handler),
        (NotificationChannel.IN_APP, in_app_handler),
    ):
        for kind in get_kinds_for_channel(channel):
            method_name = get_metadata(kind).handler_method
            handler_method = getattr(channel_handler, method_name, None)
            if handler_method is None:
                if settings.events_strict_mode:
                    raise RuntimeError(
                        f"EVENTS_STRICT_MODE: Missing notification handler\n"
                        f"Kind: {kind.value}\n"
                        f"Expected method: {type(channel_handler).__name__}.{method_name}\n\n"
                        f"Or disable strict mode: Set EVENTS_STRICT_MODE=false in .env"
                    )
                logger.warning(
                    "notification_handler_missing",
                    kind=kind.value,
                    handler_method=f"{type(channel_handler).__name__}.{method_name}",
                )
                continue
            event_bus.subscribe(kind, handler_method)

    return event_bus


def reset_event_bus() -> None:
    """Forget the event bus singleton (tests, process re-initialization)."""
    get_event_bus.cache_clear()
