"""Shared notification contracts: DTO, domain model, validation and mappers."""

from contracts.enums import NotificationSeverity, NotificationStatus
from contracts.exceptions import ContractError, FieldError, ValidationError
from contracts.mappers import (
    from_notification_model,
    from_notification_models,
    to_notification_model,
    to_notification_models,
)
from contracts.models import Notification
from contracts.schemas import NotificationDTO, new_notification
from contracts.validation import validate_notification

__version__ = "2.0.0"

__all__ = [
    "ContractError",
    "FieldError",
    "Notification",
    "NotificationDTO",
    "NotificationSeverity",
    "NotificationStatus",
    "ValidationError",
    "from_notification_model",
    "from_notification_models",
    "new_notification",
    "to_notification_model",
    "to_notification_models",
    "validate_notification",
]
