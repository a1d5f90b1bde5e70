"""Domain models for the notification contracts."""

from contracts.models.notification import Notification

__all__ = ["Notification"]
