"""Structured logging for the library.

Loggers are built locally with structlog.wrap_logger over stdlib loggers
below the "ex_result" namespace; the global structlog configuration is never
touched. Records are silent until the host application enables them, either
through its own stdlib logging setup or by opting in with configure_logging.
"""
from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

LOGGER_NAME = "ex_result"

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())

_configured = False


def configure_logging(
    level: str | None = None,
    log_format: str | None = None,
    log_file: str | None = None,
) -> None:
    """Attach a structlog-rendering handler to the package logger.

    Values left as None are read from Settings. The package logger stops
    propagating once configured, so records are not emitted twice.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Output format ("json" or "console")
        log_file: Optional log file path
    """
    global _configured
    if _configured:
        return

    if level is None or log_format is None:
        from ex_result.shared.config import get_settings
        settings = get_settings()
        level = level or settings.log_level
        log_format = log_format or settings.log_format
        log_file = log_file or settings.log_file

    pre_chain: list[Any] = [
        structlog.stdlib.ExtraAdder(),
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=pre_chain,
    )

    package_logger = logging.getLogger(LOGGER_NAME)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    package_logger.addHandler(handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        package_logger.addHandler(file_handler)

    package_logger.setLevel(getattr(logging, level.upper()))
    package_logger.propagate = False

    _configured = True


def get_logger(name: str | None = None) -> Any:
    """Get a structured logger bound to a stdlib logger.

    Event keys travel as ``extra`` on the log record, so any stdlib
    formatter can show the event and a ProcessorFormatter can recover
    the key/value pairs.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Lazily bound structured logger
    """
    return structlog.wrap_logger(
        logging.getLogger(name or LOGGER_NAME),
        processors=[
            structlog.stdlib.render_to_log_kwargs,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
    )
