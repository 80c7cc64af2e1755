"""
Dialect discovery and per-dialect SQL for the test databases.

The dialect under test comes from the ``DIALECT`` environment variable and
is validated against the backend drivers shipped with Tortoise ORM.
"""

import os
import pkgutil
from dataclasses import dataclass
from typing import Optional

import tortoise.backends

from ..config import get_config
from ..errors import UnknownDialectError

POSTGRES_NATIVE = "postgres-native"

# Shared driver packages that do not implement a dialect of their own
_ABSTRACT_BACKENDS = ("base", "odbc")

# Driver packages named after the client library rather than the dialect
_DRIVER_ALIASES = {
    "asyncpg": "postgres",
    "psycopg": "postgres",
}


def get_supported_dialects() -> list[str]:
    """
    List the dialects Tortoise ORM ships a backend driver for.

    Returns:
        Sorted dialect names, e.g. ``["mssql", "mysql", "oracle", ...]``
    """
    dialects = set()
    for module in pkgutil.iter_modules(tortoise.backends.__path__):
        if not module.ispkg or module.name.startswith(_ABSTRACT_BACKENDS):
            continue
        dialects.add(_DRIVER_ALIASES.get(module.name, module.name))
    return sorted(dialects)


def _env_dialect() -> str:
    return os.getenv("DIALECT") or get_config().test.default_dialect


def is_postgres_native() -> bool:
    """Check if the native PostgreSQL driver was requested."""
    return os.getenv("DIALECT") == POSTGRES_NATIVE


def get_test_dialect() -> str:
    """
    Get the dialect selected for this test run.

    Returns:
        Dialect name, ``postgres-native`` reported as ``postgres``

    Raises:
        UnknownDialectError: If no backend driver exists for the dialect
    """
    dialect = _env_dialect()
    if dialect == POSTGRES_NATIVE:
        dialect = "postgres"

    if dialect not in get_supported_dialects():
        raise UnknownDialectError(dialect, source="dialects")
    return dialect


def get_test_dialect_teaser(module_name: str) -> str:
    """Prefix a test module name with the upper-cased dialect under test."""
    dialect = get_test_dialect()
    if is_postgres_native():
        dialect = POSTGRES_NATIVE
    return f"[{dialect.upper()}] {module_name}"


@dataclass(frozen=True)
class DialectSQL:
    """Statements needed to tear down a database of one dialect."""

    quote_open: str
    quote_close: str
    list_tables: str
    disable_foreign_keys: Optional[str] = None
    enable_foreign_keys: Optional[str] = None
    list_foreign_keys: Optional[str] = None
    drop_suffix: str = ""

    def quote(self, identifier: str) -> str:
        """Quote a table or constraint name."""
        escaped = identifier.replace(self.quote_close, self.quote_close * 2)
        return f"{self.quote_open}{escaped}{self.quote_close}"

    def drop_table(self, table_name: str) -> str:
        """Build the DROP TABLE statement for one table."""
        return f"DROP TABLE IF EXISTS {self.quote(table_name)}{self.drop_suffix}"


DIALECT_SQL: dict[str, DialectSQL] = {
    "mysql": DialectSQL(
        quote_open="`",
        quote_close="`",
        list_tables=(
            "SELECT TABLE_NAME AS name FROM INFORMATION_SCHEMA.TABLES "
            "WHERE TABLE_SCHEMA = DATABASE() AND TABLE_TYPE = 'BASE TABLE'"
        ),
        disable_foreign_keys="SET FOREIGN_KEY_CHECKS = 0",
        enable_foreign_keys="SET FOREIGN_KEY_CHECKS = 1",
    ),
    "postgres": DialectSQL(
        quote_open='"',
        quote_close='"',
        list_tables=(
            "SELECT tablename AS name FROM pg_catalog.pg_tables "
            "WHERE schemaname = current_schema()"
        ),
        drop_suffix=" CASCADE",
    ),
    "mssql": DialectSQL(
        quote_open="[",
        quote_close="]",
        list_tables=(
            "SELECT TABLE_NAME AS name FROM INFORMATION_SCHEMA.TABLES "
            "WHERE TABLE_TYPE = 'BASE TABLE'"
        ),
        list_foreign_keys=(
            "SELECT OBJECT_NAME(parent_object_id) AS table_name, name "
            "FROM sys.foreign_keys"
        ),
    ),
    "sqlite": DialectSQL(
        quote_open='"',
        quote_close='"',
        list_tables=(
            "SELECT name FROM sqlite_master "
            "WHERE type = 'table' AND name NOT LIKE 'sqlite_%'"
        ),
        disable_foreign_keys="PRAGMA foreign_keys = OFF",
        enable_foreign_keys="PRAGMA foreign_keys = ON",
    ),
}


def get_dialect_sql(dialect: str) -> DialectSQL:
    """Get the teardown statements for a dialect."""
    try:
        return DIALECT_SQL[dialect]
    except KeyError:
        raise UnknownDialectError(dialect, source="dialects") from None
