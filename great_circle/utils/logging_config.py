"""
Structured logging configuration using structlog.

The library itself never writes log output: importing ``great_circle``
routes structlog through the standard ``logging`` module with a
``NullHandler`` on the package logger. Applications (and the runner) opt in
to output with :func:`configure_logging`, which renders either JSON for
machine consumption or human-readable console lines.
"""
import sys
import logging
import structlog
from pathlib import Path
from typing import Optional

PACKAGE_LOGGER = "great_circle"


def _shared_processors():
    return [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


def configure_library_logging():
    """
    Install silent defaults for library use.

    Leaves an existing structlog configuration alone, so an application that
    configured structlog before importing the package keeps its setup.
    """
    logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())
    if structlog.is_configured():
        return

    structlog.configure(
        processors=_shared_processors() + [structlog.processors.KeyValueRenderer()],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def configure_logging(
    log_level: str = "INFO",
    log_file: Optional[Path] = None,
    json_output: bool = False
):
    """
    Configure structured logging for the application.

    May be called more than once; loggers created earlier pick up the new
    renderer and level.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file that receives the same records as stdout
        json_output: If True, output JSON logs; else human-readable console

    Example:
        >>> from great_circle.utils.logging_config import configure_logging, get_logger
        >>> configure_logging(log_level="INFO", json_output=False)
        >>> logger = get_logger(__name__)
        >>> logger.info("route_solved", central_angle=168.56)
    """
    level = getattr(logging, log_level.upper())

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    # Replaces (and closes) handlers installed by earlier calls
    logging.basicConfig(format="%(message)s", level=level, handlers=handlers, force=True)

    if json_output:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=_shared_processors() + [renderer],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str):
    """
    Get a structured logger instance.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Structured logger with bound context

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.debug("path_constructed", node_azimuth=303.3)
    """
    return structlog.get_logger(name)
