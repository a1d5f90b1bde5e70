"""Pytest configuration and shared fixtures."""

import itertools
from collections.abc import Callable

import pytest
import structlog

from contracts.schemas.notification.notification_dto import NotificationDTO
from tests.factories import build_notification_dto


@pytest.fixture
def valid_dto() -> NotificationDTO:
    """Provide a notification DTO that satisfies every contract rule."""
    return build_notification_dto()


@pytest.fixture
def sequential_ids() -> Callable[[], str]:
    """Provide a deterministic identifier source."""
    counter = itertools.count(1)
    return lambda: f"00000000-0000-4000-8000-{next(counter):012d}"


@pytest.fixture(autouse=True)
def _clear_log_context():
    """Keep bound log context from leaking between tests."""
    yield
    structlog.contextvars.clear_contextvars()
