"""Mappers between transfer and domain representations."""

from contracts.mappers.notification_mapper import (
    from_notification_model,
    from_notification_models,
    to_notification_model,
    to_notification_models,
)

__all__ = [
    "from_notification_model",
    "from_notification_models",
    "to_notification_model",
    "to_notification_models",
]
