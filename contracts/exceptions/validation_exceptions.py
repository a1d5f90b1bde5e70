"""Exceptions raised when a payload violates the notification contract."""

from dataclasses import asdict, dataclass
from typing import Any


class ContractError(Exception):
    """Base exception for contract errors."""


@dataclass(frozen=True)
class FieldError:
    """A single violated rule.

    Attributes:
        field: Wire name of the offending field, e.g. ``sender`` or
            ``labels[1]``. Empty for errors about the payload as a whole.
        rule: Identifier of the violated rule, e.g. ``uuid`` or ``oneof``.
        message: Human readable description.
    """

    field: str
    rule: str
    message: str


class ValidationError(ContractError):
    """A DTO failed one or more contract rules.

    All violations found are reported together rather than stopping at
    the first one.
    """

    def __init__(self, errors: list[FieldError], model_name: str = "Notification"):
        """Initialize validation error.

        Args:
            errors: Every rule violation found, in field order.
            model_name: Name of the contract that was validated.
        """
        self.errors = list(errors)
        self.model_name = model_name
        details = "; ".join(
            f"{error.field or '<payload>'}: {error.message}" for error in self.errors
        )
        super().__init__(f"{model_name} failed validation: {details}")

    @property
    def fields(self) -> list[str]:
        """Wire names of the offending fields, without duplicates."""
        return list(dict.fromkeys(error.field for error in self.errors))

    def to_dict(self) -> dict[str, Any]:
        """Render the error for inclusion in an error response body."""
        return {
            "message": str(self),
            "model": self.model_name,
            "errors": [asdict(error) for error in self.errors],
        }
