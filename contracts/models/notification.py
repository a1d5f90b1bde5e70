"""Domain model for a notification."""

from dataclasses import dataclass, field

from contracts.enums.notification import NotificationSeverity, NotificationStatus


@dataclass
class Notification:
    """Internal, authoritative representation of a notification.

    Mirrors the DTO field for field, with severity and status held as
    enumerations. ``status`` is None until the notification has one. Id and
    timestamps are owned by the persistence layer once stored.
    """

    content: str
    sender: str
    severity: NotificationSeverity
    id: str = ""
    created: int = 0
    modified: int = 0
    category: str = ""
    labels: list[str] = field(default_factory=list)
    content_type: str = ""
    description: str = ""
    status: NotificationStatus | None = None


__all__ = ["Notification"]
