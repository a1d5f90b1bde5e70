"""Logging utilities for the notification contracts."""

from contracts.logging.config import setup_logging

__all__ = ["setup_logging"]
