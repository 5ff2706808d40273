"""
Centralized Logging Configuration.

All modules must use this logging setup. Do not create standalone loggers.
Defaults come from ADVISOR_LOG_LEVEL / ADVISOR_LOG_FORMAT; the CLI's
--verbose and --debug flags override the level.

Records are written to stderr so stdout carries only the command result.

Usage:
    from advisor.core.logging import get_logger, setup_logging

    setup_logging(level="DEBUG", format_type="console")

    logger = get_logger(__name__)
    logger.info("Request sent", url=url)
"""

import logging
import sys
from typing import Any

import structlog
from structlog.typing import Processor

from advisor.core.config import get_settings


def setup_logging(level: str | None = None, format_type: str | None = None) -> None:
    """
    Configure structured logging for the client.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Overrides settings.
        format_type: Output format ('json' or 'console'). Overrides settings.
    """
    if level is None or format_type is None:
        settings = get_settings()
        level = level if level is not None else settings.log_level
        format_type = format_type if format_type is not None else settings.log_format

    log_level = getattr(logging, level.upper())

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    structlog.configure(
        processors=shared_processors + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    if format_type == "console":
        renderer: Processor = structlog.dev.ConsoleRenderer(colors=False)
    else:
        renderer = structlog.processors.JSONRenderer()

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=shared_processors,
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def get_logger(name: str) -> Any:
    """
    Get a logger instance for the given name.

    Args:
        name: Logger name, typically __name__

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)
