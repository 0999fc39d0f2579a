"""Delivery channels for notifications."""

from enum import Enum


class NotificationChannel(str, Enum):
    """Where a notification is delivered."""

    EMAIL = "email"
    IN_APP = "in_app"
