"""Conversions between the Notification DTO and the domain model.

Conversions are plain field copies. They assume the DTO has already been
validated and never raise: a severity or status outside the known set is
carried over as an unknown enum value (see ``NotificationSeverity.is_known``)
and a warning is logged.
"""

from collections.abc import Iterable

import structlog

from contracts.enums.notification import NotificationSeverity, NotificationStatus
from contracts.models.notification import Notification
from contracts.schemas.notification.notification_dto import NotificationDTO

logger = structlog.get_logger(__name__)


def to_notification_model(dto: NotificationDTO) -> Notification:
    """Transform a Notification DTO into the domain model."""
    severity = NotificationSeverity(dto.severity)
    status = NotificationStatus(dto.status) if dto.status else None

    if not severity.is_known or (status is not None and not status.is_known):
        logger.warning(
            "Converting notification with unknown enum value",
            notification_id=dto.id or None,
            severity=dto.severity,
            status=dto.status,
        )

    return Notification(
        id=dto.id,
        created=dto.created,
        modified=dto.modified,
        category=dto.category,
        labels=list(dto.labels),
        content=dto.content,
        content_type=dto.content_type,
        description=dto.description,
        sender=dto.sender,
        severity=severity,
        status=status,
    )


def to_notification_models(dtos: Iterable[NotificationDTO]) -> list[Notification]:
    """Transform Notification DTOs into domain models, preserving order."""
    return [to_notification_model(dto) for dto in dtos]


def from_notification_model(notification: Notification) -> NotificationDTO:
    """Transform a domain Notification into its DTO."""
    return NotificationDTO(
        id=notification.id,
        created=notification.created,
        modified=notification.modified,
        category=notification.category,
        labels=list(notification.labels),
        content=notification.content,
        content_type=notification.content_type,
        description=notification.description,
        sender=notification.sender,
        severity=notification.severity.value,
        status=notification.status.value if notification.status is not None else "",
    )


def from_notification_models(
    notifications: Iterable[Notification],
) -> list[NotificationDTO]:
    """Transform domain Notifications into DTOs, preserving order."""
    return [from_notification_model(notification) for notification in notifications]
