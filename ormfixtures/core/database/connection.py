"""
Database instances for the fixture helpers.

A ``FixtureDatabase`` is built from a Tortoise configuration object for one
dialect and connects lazily, on the first operation that needs the database.
"""

import os
from typing import Any, Dict, Optional

from tortoise import Tortoise, connections
from tortoise.backends.base.client import BaseDBAsyncClient
from tortoise.transactions import in_transaction

from ..logging import (
    QueryLogging,
    configure_query_logging,
    get_logger,
    remove_query_handler,
)
from .dialects import POSTGRES_NATIVE, get_dialect_sql
from .models import FIXTURE_MODELS
from .tortoise_config import build_tortoise_config

logger = get_logger("core.database")


class FixtureDatabase:
    """A test database for one dialect, backed by Tortoise ORM."""

    def __init__(
        self,
        dialect: str,
        config: Dict[str, Any],
        connection_name: str = "default",
        logging: QueryLogging = False,
        native: bool = False,
    ) -> None:
        self.dialect = dialect
        self.config = config
        self.connection_name = connection_name
        self.logging = logging
        self.native = native
        self._connected = False
        self._query_handler = None

    def __repr__(self) -> str:
        return f"FixtureDatabase(dialect={self.dialect!r}, native={self.native})"

    @property
    def is_connected(self) -> bool:
        return self._connected

    @property
    def models(self) -> Dict[str, Any]:
        """Fixture models keyed by model name."""
        return {model.__name__: model for model in FIXTURE_MODELS}

    @property
    def connection(self) -> BaseDBAsyncClient:
        """Raw Tortoise client for this instance's connection."""
        return connections.get(self.connection_name)

    async def connect(self) -> None:
        """Initialize Tortoise ORM with this instance's configuration."""
        if self._connected:
            return
        self._query_handler = configure_query_logging(self.logging)
        await Tortoise.init(config=self.config)
        self._connected = True
        logger.debug("Database connection opened", dialect=self.dialect)

    async def sync(self, safe: bool = True) -> None:
        """Create the tables of every registered model."""
        await self.connect()
        await Tortoise.generate_schemas(safe=safe)
        logger.info("Database schema generated", dialect=self.dialect)

    async def query(
        self, sql: str, values: Optional[list[Any]] = None
    ) -> list[Dict[str, Any]]:
        """Run a raw statement and return the rows as dictionaries."""
        await self.connect()
        return await self.connection.execute_query_dict(sql, values)

    async def execute_script(self, sql: str) -> None:
        """Run one or more raw statements that return no rows."""
        await self.connect()
        await self.connection.execute_script(sql)

    async def show_all_tables(self) -> list[str]:
        """List the base tables currently in the database."""
        rows = await self.query(get_dialect_sql(self.dialect).list_tables)
        return sorted(row["name"] for row in rows)

    async def drop_all_tables(self) -> None:
        """Drop every table, including ones not declared by a model."""
        dialect_sql = get_dialect_sql(self.dialect)
        tables = await self.show_all_tables()
        if not tables:
            return

        drops = [dialect_sql.drop_table(table) for table in tables]

        if self.dialect == "sqlite":
            # PRAGMA foreign_keys is ignored inside a transaction
            statements = [
                dialect_sql.disable_foreign_keys,
                *drops,
                dialect_sql.enable_foreign_keys,
            ]
            await self.execute_script(";\n".join(statements) + ";")
        else:
            async with in_transaction(self.connection_name) as conn:
                if dialect_sql.list_foreign_keys:
                    for fk in await conn.execute_query_dict(
                        dialect_sql.list_foreign_keys
                    ):
                        await conn.execute_script(
                            f"ALTER TABLE {dialect_sql.quote(fk['table_name'])} "
                            f"DROP CONSTRAINT {dialect_sql.quote(fk['name'])}"
                        )
                if dialect_sql.disable_foreign_keys:
                    await conn.execute_script(dialect_sql.disable_foreign_keys)
                for statement in drops:
                    await conn.execute_script(statement)
                if dialect_sql.enable_foreign_keys:
                    await conn.execute_script(dialect_sql.enable_foreign_keys)

        logger.info("Dropped all tables", dialect=self.dialect, tables=tables)

    async def close(self) -> None:
        """Close the Tortoise connections and detach query logging."""
        remove_query_handler(self._query_handler)
        self._query_handler = None
        if not self._connected:
            return
        await Tortoise.close_connections()
        self._connected = False
        logger.debug("Database connection closed", dialect=self.dialect)


def create_database_instance(
    dialect: Optional[str] = None,
    logging: QueryLogging = False,
    connection_name: str = "default",
) -> FixtureDatabase:
    """
    Build a database instance for a dialect.

    Args:
        dialect: Dialect name, defaults to ``mysql``
        logging: SQL logging option (False, True or a callable)
        connection_name: Tortoise connection label

    Returns:
        An unconnected FixtureDatabase
    """
    dialect = dialect or "mysql"
    native = os.getenv("DIALECT") == POSTGRES_NATIVE

    config = build_tortoise_config(
        dialect, native=native, connection_name=connection_name
    )
    return FixtureDatabase(
        dialect,
        config,
        connection_name=connection_name,
        logging=logging,
        native=native and dialect == "postgres",
    )
