"""Validation of notification contract payloads."""

from contracts.validation.notification_validator import (
    NOTIFICATION_RULES,
    validate_notification,
)
from contracts.validation.rules import (
    is_non_empty_string,
    is_one_of,
    is_rfc3986_unreserved,
    is_uuid,
)

__all__ = [
    "NOTIFICATION_RULES",
    "is_non_empty_string",
    "is_one_of",
    "is_rfc3986_unreserved",
    "is_uuid",
    "validate_notification",
]
