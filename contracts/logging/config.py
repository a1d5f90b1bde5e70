"""Structlog configuration: colored console output plus optional JSON file logs."""

import logging
import logging.handlers
import os
from pathlib import Path

import colorama
import structlog

from contracts.logging.processors import add_service_metadata, console_renderer

# Rotation policy for the optional JSON file log
MAX_LOG_FILE_BYTES = 100 * 1024 * 1024
LOG_FILE_BACKUP_COUNT = 10


def setup_logging() -> None:
    """Configure structlog for a process that embeds the contracts package.

    The package never calls this itself; it only obtains loggers with
    ``structlog.get_logger``. Services call it once at startup if they do
    not already configure structlog.

    Context bound with ``structlog.contextvars.bind_contextvars``, such as a
    ``correlation_id`` for the notification being handled, is merged into
    every event, including events from the validator and mappers.

    Console Output:
    - Colored single line: [LEVEL] timestamp logger (correlation_id): message

    File Output (only when LOG_FILE_PATH is set):
    - JSON with all metadata, rotating at 100MB

    Environment Variables:
    - LOG_LEVEL: Logging level (default: INFO)
    - LOG_FILE_PATH: Path to a JSON log file (default: unset, no file output)
    - SERVICE_NAME: Service name for metadata (default: notification-contracts)
    - ENVIRONMENT: Deployment environment (default: development)
    """
    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    level = getattr(logging, log_level, logging.INFO)
    log_file_path = os.getenv("LOG_FILE_PATH")

    colorama.just_fix_windows_console()

    # Shared by structlog events and records from plain stdlib loggers
    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        add_service_metadata,
    ]

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared_processors,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=console_renderer,
            foreign_pre_chain=shared_processors,
        )
    )
    handlers: list[logging.Handler] = [console_handler]

    if log_file_path:
        Path(log_file_path).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            filename=log_file_path,
            maxBytes=MAX_LOG_FILE_BYTES,
            backupCount=LOG_FILE_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                processor=structlog.processors.JSONRenderer(),
                foreign_pre_chain=shared_processors,
            )
        )
        handlers.append(file_handler)

    root_logger = logging.getLogger()
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)

    structlog.get_logger(__name__).info(
        "Logging configured",
        log_level=log_level,
        log_file=log_file_path,
    )
