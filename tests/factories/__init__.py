"""Factories for test data generation.

Each builder returns an object that satisfies every contract rule; pass
keyword overrides to break exactly the rule under test::

    dto = build_notification_dto(sender="svc a")
"""

from typing import Any

from faker import Faker

from contracts.constants.notification import (
    NOTIFICATION_SEVERITIES,
    NOTIFICATION_STATUSES,
)
from contracts.enums.notification import NotificationSeverity, NotificationStatus
from contracts.models.notification import Notification
from contracts.schemas.notification.notification_dto import NotificationDTO

fake = Faker()


def _epoch_millis() -> int:
    return int(fake.date_time().timestamp() * 1000)


def notification_fields(**overrides: Any) -> dict[str, Any]:
    """Return a complete, valid set of notification field values."""
    created = _epoch_millis()
    fields = {
        "id": fake.uuid4(),
        "created": created,
        "modified": created + fake.pyint(min_value=0, max_value=60_000),
        "category": fake.slug(),
        "labels": [fake.slug() for _ in range(fake.pyint(min_value=1, max_value=3))],
        "content": fake.sentence(),
        "content_type": "text/plain",
        "description": fake.sentence(),
        "sender": fake.slug(),
        "severity": fake.random_element(NOTIFICATION_SEVERITIES),
        "status": fake.random_element(NOTIFICATION_STATUSES),
    }
    fields.update(overrides)
    return fields


def build_notification_dto(**overrides: Any) -> NotificationDTO:
    """Build a valid NotificationDTO."""
    return NotificationDTO(**notification_fields(**overrides))


def build_notification(**overrides: Any) -> Notification:
    """Build a valid domain Notification."""
    fields = notification_fields()
    fields["severity"] = NotificationSeverity(fields["severity"])
    fields["status"] = NotificationStatus(fields["status"])
    fields.update(overrides)
    return Notification(**fields)
