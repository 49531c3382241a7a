"""
Centralized logging configuration for the word grid package.

This module provides standardized logging configuration using structlog
for all components. Library modules only obtain loggers; applications
embedding the package call configure_logging() once at startup.
"""
import logging
import sys
from typing import Optional

import structlog
from structlog.types import FilteringBoundLogger, Processor


def _renderer(format_json: bool) -> Processor:
    if format_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list[Processor]] = None
) -> None:
    """
    Route structlog events for the index and matcher through stdlib logging.

    Args:
        level: Threshold name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: Render one JSON object per event instead of console text
        include_timestamp: Add an ISO timestamp to each event
        include_caller: Add the emitting file name and line number
        extra_processors: Processors run just before rendering
    """
    log_level = getattr(logging, level.upper())
    logging.basicConfig(level=log_level, stream=sys.stdout, format="%(message)s")

    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))
    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO]
        ))
    processors.extend(extra_processors or [])
    processors.append(_renderer(format_json))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_subsystem_logger(name: str, subsystem: str) -> FilteringBoundLogger:
    """
    Get a logger bound to a subsystem name ("index" or "matcher").

    Args:
        name: Logger name (typically __name__)
        subsystem: Subsystem tag attached to every event

    Returns:
        Configured structlog logger with subsystem context
    """
    return get_logger(name).bind(subsystem=subsystem)
