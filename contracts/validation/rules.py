"""Predicates backing the contract validation rules.

Each predicate takes a raw wire value and answers a single question, so
the rules can be tested and reused independently of any DTO.
"""

from collections.abc import Collection
from typing import Any

from contracts.constants.notification import RFC3986_UNRESERVED_PATTERN, UUID_PATTERN


def is_non_empty_string(value: Any) -> bool:
    """Return True for a string with at least one non-whitespace character."""
    return isinstance(value, str) and value.strip() != ""


def is_rfc3986_unreserved(value: Any) -> bool:
    """Return True if every character is RFC3986 unreserved.

    Unreserved characters are ``A-Z a-z 0-9 - . _ ~``. The empty string is
    rejected.
    """
    return (
        isinstance(value, str)
        and RFC3986_UNRESERVED_PATTERN.fullmatch(value) is not None
    )


def is_uuid(value: Any) -> bool:
    """Return True for a UUID in canonical lowercase hyphenated form."""
    return isinstance(value, str) and UUID_PATTERN.fullmatch(value) is not None


def is_one_of(value: Any, allowed: Collection[str]) -> bool:
    """Return True if value exactly matches one of the allowed strings.

    Matching is case-sensitive: ``"critical"`` is not ``"CRITICAL"``.
    """
    return isinstance(value, str) and value in allowed
