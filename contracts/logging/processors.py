"""Structlog processors used by ``setup_logging``."""

import os

from colorama import Fore, Style
from structlog.typing import EventDict, WrappedLogger

DEFAULT_SERVICE_NAME = "notification-contracts"
DEFAULT_ENVIRONMENT = "development"

# Keys rendered in the console prefix, or kept for the JSON file only
_PREFIX_KEYS = ("level", "timestamp", "logger", "event", "correlation_id")
_FILE_ONLY_KEYS = ("service_name", "environment", "process_id")

_LEVEL_COLORS = {
    "debug": Fore.CYAN,
    "info": Fore.GREEN,
    "warning": Fore.YELLOW,
    "error": Fore.RED,
    "critical": Fore.RED + Style.BRIGHT,
}


def add_service_metadata(
    _logger: WrappedLogger, _method_name: str, event_dict: EventDict
) -> EventDict:
    """Tag events with the embedding service, its environment and process.

    SERVICE_NAME and ENVIRONMENT are read per event so a service may set
    them after logging is configured. Values already bound on the logger
    take precedence.
    """
    event_dict.setdefault(
        "service_name", os.getenv("SERVICE_NAME", DEFAULT_SERVICE_NAME)
    )
    event_dict.setdefault("environment", os.getenv("ENVIRONMENT", DEFAULT_ENVIRONMENT))
    event_dict.setdefault("process_id", os.getpid())
    return event_dict


def console_renderer(
    _logger: WrappedLogger, _method_name: str, event_dict: EventDict
) -> str:
    """Render an event as one colored console line.

    Format: ``[LEVEL] timestamp logger (correlation_id): message key=value ...``.
    The correlation part appears only when a consumer bound one with
    ``structlog.contextvars.bind_contextvars(correlation_id=...)``.
    """
    level = str(event_dict.get("level", "info")).lower()
    color = _LEVEL_COLORS.get(level, Fore.WHITE)

    line = (
        f"{color}[{level.upper():<8}]{Style.RESET_ALL} "
        f"{event_dict.get('timestamp', '')} "
        f"{Fore.BLUE}{event_dict.get('logger', 'root')}{Style.RESET_ALL}"
    )
    correlation_id = event_dict.get("correlation_id")
    if correlation_id:
        line += f" {Fore.MAGENTA}({correlation_id}){Style.RESET_ALL}"
    line += f": {event_dict.get('event', '')}"

    context = " ".join(
        f"{key}={value}"
        for key, value in event_dict.items()
        if key not in _PREFIX_KEYS and key not in _FILE_ONLY_KEYS
    )
    if context:
        line += f" {Fore.YELLOW}{context}{Style.RESET_ALL}"
    return line
