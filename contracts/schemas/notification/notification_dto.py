"""Notification data transfer object shared by producers and consumers."""

import uuid
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from pydantic import ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from contracts.constants.notification import OMITTED_WHEN_EMPTY
from contracts.exceptions.validation_exceptions import FieldError, ValidationError
from contracts.schemas.base_schema_model import BaseSchemaModel
from contracts.validation.notification_validator import validate_notification


class NotificationDTO(BaseSchemaModel):
    """Wire representation of a notification.

    Constructing or parsing a DTO only checks the shape of the data
    (strings are strings, labels is a list). The contract rules, such as
    the UUID format of ``id`` or the allowed severities, are applied by
    ``validate_contract()``.

    Severity and status are plain strings here; the domain model holds them
    as enumerations. Empty strings, zero timestamps and an empty label list
    mean "unset" and are left out of ``to_payload()``.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "d0a3e6b5-5c47-4d0e-9a36-3a8c9f3f3f2e",
                "category": "security",
                "labels": ["door", "floor-2"],
                "content": "Door 2A opened after hours",
                "contentType": "text/plain",
                "sender": "access-control",
                "severity": "CRITICAL",
                "status": "NEW",
            }
        }
    )

    id: str = Field(default="", description="UUID of the notification")
    created: int = Field(
        default=0, description="Creation time in epoch milliseconds (server-assigned)"
    )
    modified: int = Field(
        default=0,
        description="Last modification time in epoch milliseconds (server-assigned)",
    )
    category: str = Field(
        default="", description="Category; required when labels is empty"
    )
    labels: list[str] = Field(
        default_factory=list, description="Labels; required when category is empty"
    )
    content: str = Field(..., description="Notification body")
    content_type: str = Field(default="", description="MIME type of the content")
    description: str = Field(default="", description="Free-form description")
    sender: str = Field(..., description="Name of the sending service")
    severity: str = Field(..., description="One of MINOR, NORMAL, CRITICAL")
    status: str = Field(default="", description="One of NEW, PROCESSED, ESCALATED")

    def validate_contract(self) -> "NotificationDTO":
        """Apply the contract rules to this DTO.

        Returns:
            The DTO itself, for chaining.

        Raises:
            ValidationError: If any contract rule is violated.
        """
        validate_notification(self)
        return self

    def to_payload(self) -> dict[str, Any]:
        """Return the wire-shaped dict, omitting unset optional fields."""
        payload = self.model_dump(by_alias=True)
        return {
            key: value
            for key, value in payload.items()
            if key not in OMITTED_WHEN_EMPTY or value
        }

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> "NotificationDTO":
        """Parse a wire dict into a DTO.

        Only the shape is checked; call ``validate_contract()`` afterwards
        to apply the contract rules.

        Raises:
            ValidationError: If the payload has the wrong shape, for example
                a missing ``content`` or a ``labels`` value that is not a list.
        """
        try:
            return cls.model_validate(data)
        except PydanticValidationError as e:
            raise ValidationError(
                [
                    FieldError(
                        field=_format_location(error["loc"]),
                        rule=error["type"],
                        message=error["msg"],
                    )
                    for error in e.errors()
                ]
            ) from e


def _format_location(loc: tuple[int | str, ...]) -> str:
    """Render a pydantic error location as a wire path, e.g. ``labels[1]``."""
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}" if path else part
    return path


def new_notification(
    labels: Sequence[str],
    category: str,
    content: str,
    sender: str,
    severity: str,
    *,
    id_factory: Callable[[], str] | None = None,
) -> NotificationDTO:
    """Create a notification DTO with a freshly generated id.

    Created, modified, content type, description and status are left
    unset. The contract rules are not applied.

    Args:
        labels: Labels for the notification (may be empty).
        category: Category for the notification (may be empty).
        content: Notification body.
        sender: Name of the sending service.
        severity: Severity as wire text, e.g. ``"NORMAL"``.
        id_factory: Source of identifiers. Defaults to random UUID v4 text.

    Returns:
        The new NotificationDTO.
    """
    make_id = id_factory or (lambda: str(uuid.uuid4()))
    return NotificationDTO(
        id=make_id(),
        labels=list(labels),
        category=category,
        content=content,
        sender=sender,
        severity=severity,
    )
