"""Constants package for the notification contracts."""

from contracts.constants.notification import (
    NOTIFICATION_SEVERITIES,
    NOTIFICATION_STATUSES,
    OMITTED_WHEN_EMPTY,
    RFC3986_UNRESERVED_PATTERN,
    UUID_PATTERN,
)

__all__ = [
    "NOTIFICATION_SEVERITIES",
    "NOTIFICATION_STATUSES",
    "OMITTED_WHEN_EMPTY",
    "RFC3986_UNRESERVED_PATTERN",
    "UUID_PATTERN",
]
