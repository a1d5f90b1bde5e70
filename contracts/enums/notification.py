"""Notification-related enumerations.

This module contains the closed severity and status enumerations used by
the notification domain model. Wire payloads carry these as plain strings.
"""

from enum import Enum


class _TolerantStrEnum(str, Enum):
    """String enumeration whose lookup never raises for unknown text.

    ``NotificationSeverity("LOW")`` returns an unregistered pseudo-member
    carrying the raw value instead of raising ``ValueError``. Pseudo-members
    compare equal to their text and report ``is_known`` as False, so callers
    that need strictness can reject them explicitly. ``str()`` renders the
    raw value for members and pseudo-members alike.
    """

    @classmethod
    def _missing_(cls, value: object) -> "_TolerantStrEnum | None":
        if not isinstance(value, str):
            return None
        pseudo_member = str.__new__(cls, value)
        pseudo_member._name_ = None
        pseudo_member._value_ = value
        return pseudo_member

    @property
    def is_known(self) -> bool:
        """Whether this value is one of the declared members."""
        return self._value_ in type(self)._value2member_map_

    def __repr__(self) -> str:
        if self._name_ is None:
            return f"<{type(self).__name__} (unknown): {self._value_!r}>"
        return super().__repr__()

    def __str__(self) -> str:
        return self._value_


class NotificationSeverity(_TolerantStrEnum):
    """Urgency classification of a notification."""

    MINOR = "MINOR"
    NORMAL = "NORMAL"
    CRITICAL = "CRITICAL"


class NotificationStatus(_TolerantStrEnum):
    """Lifecycle state of a notification.

    An unset status is represented as ``None`` on the domain model, never
    as an empty-string member.
    """

    NEW = "NEW"
    PROCESSED = "PROCESSED"
    ESCALATED = "ESCALATED"
