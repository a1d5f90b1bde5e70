"""Notification contract constants.

Allowed enumeration values, character-class patterns, and wire field
names shared by the DTO, the validator and the mappers.
"""

import re

# Wire values accepted for the severity and status fields (case-sensitive)
NOTIFICATION_SEVERITIES = ("MINOR", "NORMAL", "CRITICAL")
NOTIFICATION_STATUSES = ("NEW", "PROCESSED", "ESCALATED")

# RFC3986 section 2.3 unreserved characters: ALPHA / DIGIT / "-" / "." / "_" / "~"
RFC3986_UNRESERVED_PATTERN = re.compile(r"^[A-Za-z0-9\-._~]+$")

# Canonical lowercase 8-4-4-4-12 textual form
UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$"
)

# Wire fields dropped from the payload when they hold their zero value.
# content, sender and severity are always present.
OMITTED_WHEN_EMPTY = frozenset(
    {
        "id",
        "created",
        "modified",
        "category",
        "labels",
        "contentType",
        "description",
        "status",
    }
)
