"""
Database package for the ORM fixture helpers.

This package provides the Tortoise ORM configuration, fixture models,
database instances and teardown utilities.
"""

from .cleanup import clear_database, remove_stray_files
from .connection import FixtureDatabase, create_database_instance
from .dialects import (
    DIALECT_SQL,
    DialectSQL,
    get_dialect_sql,
    get_supported_dialects,
    get_test_dialect,
    get_test_dialect_teaser,
    is_postgres_native,
)
from .tortoise_config import (
    ENGINES,
    build_connection_config,
    build_tortoise_config,
    credentials_from_url,
)
from .triggers import TRIGGER_STATEMENTS, get_dummy_create_trigger_statement

__all__ = [
    "DIALECT_SQL",
    "DialectSQL",
    "ENGINES",
    "FixtureDatabase",
    "TRIGGER_STATEMENTS",
    "build_connection_config",
    "build_tortoise_config",
    "clear_database",
    "create_database_instance",
    "credentials_from_url",
    "get_dialect_sql",
    "get_dummy_create_trigger_statement",
    "get_supported_dialects",
    "get_test_dialect",
    "get_test_dialect_teaser",
    "is_postgres_native",
    "remove_stray_files",
]
