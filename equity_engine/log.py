"""
Logging setup for the screener and the analytics engine.

Modules obtain loggers through ``get_logger(__name__)``; only the entry
point calls ``configure_logging``, with the level and format taken from
``config.LOG_LEVEL`` and ``config.LOG_JSON`` unless told otherwise.
"""
import logging
import sys

import structlog

import config as cfg


def configure_logging(
    level: str = cfg.LOG_LEVEL,
    format_json: bool = cfg.LOG_JSON,
    include_timestamp: bool = True,
) -> None:
    """
    Route structlog events through the standard library root logger.

    Args:
        level: Level name such as DEBUG or WARNING; unknown names raise AttributeError
        format_json: One JSON object per line instead of the console renderer
        include_timestamp: Stamp each event with an ISO-8601 time
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        stream=sys.stdout,
        format="%(message)s",
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.format_exc_info,
    ]
    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    renderer = (
        structlog.processors.JSONRenderer()
        if format_json
        else structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())
    )

    structlog.configure(
        processors=processors + [renderer],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Logger bound to *name*, normally the caller's ``__name__``."""
    return structlog.get_logger(name)
