"""
Testing utilities for ORM test suites.

Provides the database setup helpers, per-dialect lookups and the pytest
fixtures built on top of them.
"""

from ..core.database.cleanup import clear_database
from ..core.database.connection import create_database_instance
from ..core.database.dialects import (
    get_supported_dialects,
    get_test_dialect,
    get_test_dialect_teaser,
)
from ..core.database.triggers import get_dummy_create_trigger_statement
from .helpers import check_match_for_dialects, init_test_data, init_tests

__all__ = [
    "check_match_for_dialects",
    "clear_database",
    "create_database_instance",
    "get_dummy_create_trigger_statement",
    "get_supported_dialects",
    "get_test_dialect",
    "get_test_dialect_teaser",
    "init_test_data",
    "init_tests",
]
