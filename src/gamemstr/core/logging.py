"""Structured logging for gamemstr.

Events are emitted through structlog as key/value pairs. Output goes to
stdout, or to a log file when one is configured; the renderer is either
human-readable console output or one JSON object per line.

The library never configures the standard ``logging`` module: host
applications keep control of their own handlers.

Example:
    >>> from gamemstr.core.logging import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Entity constructed", entity_type="World", id="abc")
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, TYPE_CHECKING, Any

import structlog
from structlog.types import Processor


if TYPE_CHECKING:
    from structlog.types import EventDict, WrappedLogger


_log_stream: IO[str] | None = None


def add_app_context(
    logger: WrappedLogger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Add library context to log entries.

    Args:
        logger: The wrapped logger instance.
        method_name: Name of the logging method called.
        event_dict: The event dictionary to modify.

    Returns:
        The modified event dictionary with app context.
    """
    event_dict["app"] = "gamemstr"
    return event_dict


def _close_log_stream() -> None:
    global _log_stream
    if _log_stream is not None:
        _log_stream.close()
        _log_stream = None


def configure_logging(
    *,
    level: str = "INFO",
    json_format: bool = False,
    log_file: str | Path | None = None,
) -> None:
    """Configure library logging.

    Reconfiguring closes any log file opened by a previous call.

    Args:
        level: The logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        json_format: If True, render events as JSON lines.
        log_file: Optional file to append events to instead of stdout.
            Its parent directory must already exist.

    Example:
        >>> configure_logging(level="DEBUG", json_format=False)
    """
    global _log_stream

    _close_log_stream()

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        add_app_context,
        structlog.processors.StackInfoRenderer(),
    ]
    if json_format:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=log_file is None,
                exception_formatter=structlog.dev.plain_traceback,
            )
        )

    if log_file is None:
        logger_factory: Any = structlog.PrintLoggerFactory()
    else:
        _log_stream = Path(log_file).open("a", encoding="utf-8")
        logger_factory = structlog.WriteLoggerFactory(file=_log_stream)

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper(), logging.INFO)
        ),
        context_class=dict,
        logger_factory=logger_factory,
        cache_logger_on_first_use=False,
    )


def reset_logging() -> None:
    """Close any open log file and restore structlog's defaults."""
    _close_log_stream()
    structlog.reset_defaults()


def configure_from_settings() -> None:
    """Configure logging from the cached library settings.

    Example:
        >>> configure_from_settings()
    """
    from gamemstr.core.config import get_settings

    settings = get_settings()
    configure_logging(level=settings.log_level, json_format=settings.json_logs)


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a configured logger instance.

    Args:
        name: Optional name for the logger (typically __name__).

    Returns:
        A configured structlog BoundLogger instance.
    """
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Bind context variables included in all subsequent logs.

    Args:
        **kwargs: Key-value pairs to bind to the logging context.

    Example:
        >>> bind_context(campaign_id="abc123")
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all bound context variables."""
    structlog.contextvars.clear_contextvars()


__all__ = [
    "configure_logging",
    "configure_from_settings",
    "reset_logging",
    "get_logger",
    "bind_context",
    "clear_context",
]
