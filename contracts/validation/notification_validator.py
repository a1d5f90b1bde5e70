"""Contract validator for the Notification DTO.

The rules are an explicit table of checks evaluated in field order. Every
check yields zero or more ``FieldError`` values and all of them are
collected before anything is raised, so a caller sees every problem with
a payload at once.

Rule identifiers reported in errors:

- ``required``: field is missing or empty.
- ``required_without``: neither ``category`` nor ``labels`` is populated.
- ``none-empty-string``: value is present but only whitespace.
- ``rfc3986-unreserved-chars``: value has characters outside ``A-Za-z0-9-._~``.
- ``uuid``: ``id`` is set but not a UUID.
- ``oneof``: enumerated field holds an unknown value.
"""

from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING

import structlog

from contracts.constants.notification import (
    NOTIFICATION_SEVERITIES,
    NOTIFICATION_STATUSES,
)
from contracts.exceptions.validation_exceptions import FieldError, ValidationError
from contracts.validation.rules import (
    is_non_empty_string,
    is_one_of,
    is_rfc3986_unreserved,
    is_uuid,
)

if TYPE_CHECKING:
    from contracts.schemas.notification.notification_dto import NotificationDTO

logger = structlog.get_logger(__name__)

Rule = Callable[["NotificationDTO"], Iterator[FieldError]]


def _check_identifier_string(field: str, value: str) -> Iterator[FieldError]:
    """Non-empty and restricted to RFC3986 unreserved characters."""
    if not is_non_empty_string(value):
        yield FieldError(field, "none-empty-string", f"{field} must not be blank")
    elif not is_rfc3986_unreserved(value):
        yield FieldError(
            field,
            "rfc3986-unreserved-chars",
            f"{field} may only contain letters, digits, '-', '.', '_' and '~'",
        )


def _check_id(dto: "NotificationDTO") -> Iterator[FieldError]:
    if dto.id and not is_uuid(dto.id):
        yield FieldError("id", "uuid", f"id must be a UUID, got {dto.id!r}")


def _check_category(dto: "NotificationDTO") -> Iterator[FieldError]:
    if not dto.category:
        if not dto.labels:
            yield FieldError(
                "category",
                "required_without",
                "category is required when labels is empty",
            )
        return
    yield from _check_identifier_string("category", dto.category)


def _check_labels(dto: "NotificationDTO") -> Iterator[FieldError]:
    if not dto.labels:
        if not dto.category:
            yield FieldError(
                "labels",
                "required_without",
                "labels is required when category is empty",
            )
        return
    for index, label in enumerate(dto.labels):
        yield from _check_identifier_string(f"labels[{index}]", label)


def _check_content(dto: "NotificationDTO") -> Iterator[FieldError]:
    if not dto.content:
        yield FieldError("content", "required", "content is required")
    elif not is_non_empty_string(dto.content):
        yield FieldError("content", "none-empty-string", "content must not be blank")


def _check_sender(dto: "NotificationDTO") -> Iterator[FieldError]:
    if not dto.sender:
        yield FieldError("sender", "required", "sender is required")
        return
    yield from _check_identifier_string("sender", dto.sender)


def _check_severity(dto: "NotificationDTO") -> Iterator[FieldError]:
    if not dto.severity:
        yield FieldError("severity", "required", "severity is required")
    elif not is_one_of(dto.severity, NOTIFICATION_SEVERITIES):
        yield FieldError(
            "severity",
            "oneof",
            f"severity must be one of {', '.join(NOTIFICATION_SEVERITIES)}, "
            f"got {dto.severity!r}",
        )


def _check_status(dto: "NotificationDTO") -> Iterator[FieldError]:
    if dto.status and not is_one_of(dto.status, NOTIFICATION_STATUSES):
        yield FieldError(
            "status",
            "oneof",
            f"status must be one of {', '.join(NOTIFICATION_STATUSES)}, "
            f"got {dto.status!r}",
        )


NOTIFICATION_RULES: tuple[Rule, ...] = (
    _check_id,
    _check_category,
    _check_labels,
    _check_content,
    _check_sender,
    _check_severity,
    _check_status,
)


def validate_notification(dto: "NotificationDTO") -> None:
    """Apply every notification contract rule to a DTO.

    Args:
        dto: The notification to check.

    Raises:
        ValidationError: If any rule is violated. ``errors`` lists all of
            them in field order.
    """
    errors = [error for rule in NOTIFICATION_RULES for error in rule(dto)]
    if errors:
        logger.debug(
            "Notification failed validation",
            notification_id=dto.id or None,
            failed_rules=[f"{error.field}:{error.rule}" for error in errors],
        )
        raise ValidationError(errors)
