"""Enumerations for the notification contracts."""

from contracts.enums.notification import NotificationSeverity, NotificationStatus

__all__ = ["NotificationSeverity", "NotificationStatus"]
