"""
Error types for the ORM fixture helpers.

This module provides error categorization and the exceptions raised while
building, clearing or querying test databases. Nothing here is retried:
setup failures are handed to the caller's error callback or propagate.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional


class ErrorType(Enum):
    """Types of errors that can occur while preparing fixtures."""

    CONFIGURATION_ERROR = "configuration_error"  # Unknown dialect, bad settings
    VALIDATION_ERROR = "validation_error"  # Invalid helper arguments
    DATABASE_ERROR = "database_error"  # Driver or SQL failure
    FILESYSTEM_ERROR = "filesystem_error"  # Scratch directory cleanup
    UNKNOWN_ERROR = "unknown_error"  # Unexpected errors


@dataclass
class ErrorDetails:
    """Detailed error information for a failed fixture operation."""

    error_type: ErrorType
    error_code: str
    error_message: str
    error_context: Dict[str, Any]
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    source: Optional[str] = None  # Where the error originated


class FixtureError(Exception):
    """Base class for errors raised by the fixture helpers."""

    error_type: ErrorType = ErrorType.UNKNOWN_ERROR
    error_code: str = "fixture_error"

    def __init__(
        self,
        message: str,
        error_context: Optional[Dict[str, Any]] = None,
        source: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_context = error_context or {}
        self.source = source

    @property
    def details(self) -> ErrorDetails:
        """Structured details for this error."""
        return ErrorDetails(
            error_type=self.error_type,
            error_code=self.error_code,
            error_message=self.message,
            error_context=self.error_context,
            source=self.source,
        )


class UnknownDialectError(FixtureError):
    """Raised when a dialect name is not supported."""

    error_type = ErrorType.CONFIGURATION_ERROR
    error_code = "unknown_dialect"

    def __init__(self, dialect: str, source: Optional[str] = None) -> None:
        super().__init__(
            "The dialect you have passed is unknown. Did you really mean: "
            f"{dialect}",
            error_context={"dialect": dialect},
            source=source,
        )
        self.dialect = dialect


class MissingTriggerStatementError(FixtureError):
    """Raised when no dummy trigger statement exists for a dialect."""

    error_type = ErrorType.CONFIGURATION_ERROR
    error_code = "missing_trigger_statement"

    def __init__(self, dialect: str, source: Optional[str] = None) -> None:
        super().__init__(
            f"CREATE TRIGGER not set for dialect {dialect}",
            error_context={"dialect": dialect},
            source=source,
        )
        self.dialect = dialect


class InvalidOptionsError(FixtureError):
    """Raised when a helper is called without its required callbacks."""

    error_type = ErrorType.VALIDATION_ERROR
    error_code = "invalid_options"


class UndefinedExpectationError(FixtureError):
    """Raised when a per-dialect expectation table has no entry for a dialect."""

    error_type = ErrorType.VALIDATION_ERROR
    error_code = "undefined_expectation"

    def __init__(self, dialect: str, source: Optional[str] = None) -> None:
        super().__init__(
            f'Undefined expectation for "{dialect}"!',
            error_context={"dialect": dialect},
            source=source,
        )
        self.dialect = dialect


def create_error_response(
    error: BaseException, source: Optional[str] = None
) -> Dict[str, Any]:
    """Create error response data structure for structured logs."""
    if isinstance(error, FixtureError):
        details = error.details
        return {
            "error_type": details.error_type.value,
            "error_code": details.error_code,
            "error_message": details.error_message,
            "error_context": details.error_context,
            "timestamp": details.timestamp.isoformat(),
            "source": source or details.source,
        }

    return {
        "error_type": ErrorType.UNKNOWN_ERROR.value,
        "error_code": type(error).__name__,
        "error_message": str(error),
        "error_context": {},
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "source": source,
    }
