"""Notification schemas."""

from contracts.schemas.notification.notification_dto import (
    NotificationDTO,
    new_notification,
)

__all__ = ["NotificationDTO", "new_notification"]
