"""Exception types for the notification contracts."""

from contracts.exceptions.validation_exceptions import (
    ContractError,
    FieldError,
    ValidationError,
)

__all__ = ["ContractError", "FieldError", "ValidationError"]
