"""Structured logging configuration using structlog."""

import logging
import sys
import uuid
from typing import Any

import structlog


def configure_logging(
    level: str = "WARNING",
    json_output: bool = False,
) -> None:
    """
    Configure structured logging for the report tool.

    Log events go to stderr so that report summaries and JSON exports
    written to stdout stay machine-readable.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        json_output: If True, emit one JSON object per event.
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=log_level,
    )

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_output:
        processors: list[structlog.types.Processor] = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """
    Get a logger instance.

    Args:
        name: Logger name (typically __name__ of the module).

    Returns:
        Configured structlog logger.
    """
    return structlog.get_logger(name)


def log_context(**kwargs: Any) -> structlog.contextvars.bound_contextvars:
    """
    Context manager for adding context to all logs within the block.

    Example:
        with log_context(source="scan_a.xlsx"):
            logger.info("Reading worksheet")  # Will include source

    Args:
        **kwargs: Key-value pairs to add to log context.

    Returns:
        Context manager that binds the values.
    """
    return structlog.contextvars.bound_contextvars(**kwargs)


def new_run_id() -> str:
    """Short identifier used to correlate the log events of one pipeline run."""
    return uuid.uuid4().hex[:8]


def configure_library_defaults() -> None:
    """
    Send warnings to stderr and drop lower levels, unless structlog is configured.

    Applied on import, so code that calls the pipeline without
    configure_logging() never gets log events on stdout. An application's
    own structlog configuration is left untouched.
    """
    if structlog.is_configured():
        return

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


configure_library_defaults()
