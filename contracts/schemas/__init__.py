"""Schemas for the notification contracts."""

from contracts.schemas.base_schema_model import BaseSchemaModel
from contracts.schemas.notification import NotificationDTO, new_notification

__all__ = ["BaseSchemaModel", "NotificationDTO", "new_notification"]
