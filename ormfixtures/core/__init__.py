"""
Core module for the ORM fixture helpers.

This module contains configuration management, logging setup, error types
and the database layer.
"""

from .config import OrmFixturesConfig, get_config
from .errors import (
    ErrorDetails,
    ErrorType,
    FixtureError,
    InvalidOptionsError,
    MissingTriggerStatementError,
    UndefinedExpectationError,
    UnknownDialectError,
    create_error_response,
)
from .logging import get_logger, setup_logging

__all__ = [
    "OrmFixturesConfig",
    "get_config",
    "setup_logging",
    "get_logger",
    "ErrorType",
    "ErrorDetails",
    "FixtureError",
    "InvalidOptionsError",
    "MissingTriggerStatementError",
    "UndefinedExpectationError",
    "UnknownDialectError",
    "create_error_response",
]
