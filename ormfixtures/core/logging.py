"""
Logging configuration for the ORM fixture helpers using structlog.

Fixture setup and teardown steps are logged as structured events. SQL emitted
by the ORM's client logger can be silenced, shown, or forwarded to a callable.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Union

import structlog

from .config import get_config

# Logger the Tortoise database clients write their SQL statements to
QUERY_LOGGER_NAME = "tortoise.db_client"

QueryLogging = Union[bool, Callable[[str], Any]]


def _add_dialect(
    logger: Any, method_name: str, event_dict: Dict[str, Any]
) -> Dict[str, Any]:
    """Add the dialect under test for easier filtering."""
    event_dict.setdefault(
        "dialect", os.getenv("DIALECT") or get_config().test.default_dialect
    )
    return event_dict


def setup_logging(
    level: Optional[str] = None,
    log_file: Optional[Path] = None,
    json_output: Optional[bool] = None,
) -> None:
    """
    Set up structured logging.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to log file
        json_output: Whether to output JSON logs instead of console lines
    """
    config = get_config()

    log_level = (level or config.logging.level).upper()
    log_file = log_file or config.logging.log_file
    if json_output is None:
        json_output = config.logging.json_output

    processors: list[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        _add_dialect,
    ]

    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level),
    )

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(getattr(logging, log_level))
        file_handler.setFormatter(logging.Formatter("%(message)s"))
        logging.getLogger().addHandler(file_handler)


def get_logger(name: str) -> Any:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Structured logger instance
    """
    return structlog.get_logger(name)


def log_fixture_step(
    step: str,
    dialect: str,
    status: str = "started",
    details: Optional[Dict[str, Any]] = None,
) -> None:
    """
    Log a fixture setup or teardown step with structured data.

    Args:
        step: Name of the step (create_instance, clear_database, ...)
        dialect: Dialect the step runs against
        status: Status of the step (started, completed, failed)
        details: Additional details about the step
    """
    logger = structlog.get_logger("fixtures")

    log_data = {
        "step": step,
        "dialect": dialect,
        "status": status,
        "event_type": "fixture_step",
    }

    if details:
        log_data.update(details)

    if status == "failed":
        logger.error("Fixture step failed", **log_data)
    elif status == "completed":
        logger.info("Fixture step completed", **log_data)
    else:
        logger.debug("Fixture step started", **log_data)


class QueryLogHandler(logging.Handler):
    """Forward SQL log records to a callable."""

    def __init__(self, callback: Callable[[str], Any]) -> None:
        super().__init__(level=logging.DEBUG)
        self.callback = callback

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.callback(record.getMessage())
        except Exception:
            self.handleError(record)


def configure_query_logging(option: QueryLogging) -> Optional[QueryLogHandler]:
    """
    Configure how the ORM's SQL statements are logged.

    A callable replaces the normal handlers: records no longer reach the
    root logger until the handler is removed.

    Args:
        option: False to silence SQL, True to log it at DEBUG level, or a
            callable receiving each statement

    Returns:
        The forwarding handler when a callable was given, otherwise None
    """
    query_logger = logging.getLogger(QUERY_LOGGER_NAME)
    query_logger.propagate = True

    if option is False or option is None:
        query_logger.setLevel(logging.WARNING)
        return None

    query_logger.setLevel(logging.DEBUG)
    if option is True:
        return None

    handler = QueryLogHandler(option)
    query_logger.addHandler(handler)
    query_logger.propagate = False
    return handler


def remove_query_handler(handler: Optional[QueryLogHandler]) -> None:
    """Detach a handler installed by configure_query_logging."""
    if handler is None:
        return
    query_logger = logging.getLogger(QUERY_LOGGER_NAME)
    query_logger.removeHandler(handler)
    query_logger.propagate = True
