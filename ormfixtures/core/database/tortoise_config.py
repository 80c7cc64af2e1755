"""
Tortoise ORM configuration for the fixture databases.

Builds the ``Tortoise.init`` configuration for a dialect from the settings
block of that dialect, or from a SQLAlchemy-style URL when one is given.
"""

from pathlib import Path
from typing import Any, Dict, Optional

from sqlalchemy.engine import make_url

from ..config import MSSQLConfig, MySQLConfig, SQLiteConfig, get_config
from ..errors import UnknownDialectError

MODELS_MODULE = "ormfixtures.core.database.models"
APP_LABEL = "models"

ENGINES: Dict[str, str] = {
    "mysql": "tortoise.backends.mysql",
    "postgres": "tortoise.backends.asyncpg",
    "postgres-native": "tortoise.backends.psycopg",
    "mssql": "tortoise.backends.mssql",
    "sqlite": "tortoise.backends.sqlite",
}

# SQLAlchemy backend names for each dialect
_URL_BACKENDS = {
    "mysql": "mysql",
    "postgres": "postgresql",
    "mssql": "mssql",
    "sqlite": "sqlite",
}


def get_engine(dialect: str, native: bool = False) -> str:
    """Get the Tortoise backend module for a dialect."""
    key = "postgres-native" if native and dialect == "postgres" else dialect
    try:
        return ENGINES[key]
    except KeyError:
        raise UnknownDialectError(dialect, source="tortoise_config") from None


def credentials_from_url(url: str, dialect: str) -> Dict[str, Any]:
    """
    Convert a SQLAlchemy-style URL into Tortoise credentials.

    Args:
        url: URL such as ``postgresql+psycopg2://user:pw@host:5432/db``
        dialect: Dialect the URL is expected to point at

    Returns:
        Credentials dictionary for the dialect's Tortoise backend

    Raises:
        UnknownDialectError: If the URL names a different backend
    """
    parsed = make_url(url)
    if _URL_BACKENDS.get(dialect) != parsed.get_backend_name():
        raise UnknownDialectError(parsed.get_backend_name(), source="database_url")

    if dialect == "sqlite":
        return {"file_path": parsed.database or ":memory:"}

    credentials: Dict[str, Any] = {
        "host": parsed.host,
        "port": parsed.port,
        "user": parsed.username,
        "password": parsed.password or "",
        "database": parsed.database,
    }
    return {key: value for key, value in credentials.items() if value is not None}


def _credentials_from_config(dialect: str) -> Dict[str, Any]:
    block = get_config().get_dialect_config(dialect)

    if isinstance(block, SQLiteConfig):
        return {"file_path": str(block.storage)}

    credentials: Dict[str, Any] = {
        "host": block.host,
        "port": block.port,
        "user": block.username,
        "password": block.password,
        "database": block.database,
    }
    if isinstance(block, MySQLConfig):
        credentials["charset"] = block.charset
    return credentials


def build_connection_config(dialect: str, native: bool = False) -> Dict[str, Any]:
    """
    Build the connection entry for a dialect.

    ``TEST_DATABASE_URL`` takes precedence over the dialect's settings block
    when it points at the same backend.

    Args:
        dialect: Dialect name (mysql, postgres, mssql, sqlite)
        native: Use the native PostgreSQL driver

    Returns:
        Tortoise connection dictionary with ``engine`` and ``credentials``
    """
    engine = get_engine(dialect, native)
    config = get_config()

    database_url = config.test.database_url
    url_backend = make_url(database_url).get_backend_name() if database_url else None
    if database_url and url_backend == _URL_BACKENDS[dialect]:
        credentials = credentials_from_url(database_url, dialect)
    else:
        credentials = _credentials_from_config(dialect)

    if dialect == "sqlite":
        file_path = credentials["file_path"]
        if file_path != ":memory:":
            Path(file_path).parent.mkdir(parents=True, exist_ok=True)

    if dialect == "mssql":
        mssql: MSSQLConfig = config.mssql
        credentials.setdefault("driver", mssql.driver)
        if mssql.trust_server_certificate:
            # Silence the ODBC 18 certificate checks against test servers
            credentials.setdefault("TrustServerCertificate", "yes")

    return {"engine": engine, "credentials": credentials}


def build_tortoise_config(
    dialect: str,
    native: bool = False,
    connection_name: str = "default",
    models: Optional[list[str]] = None,
) -> Dict[str, Any]:
    """
    Build the complete ``Tortoise.init`` configuration.

    Args:
        dialect: Dialect name
        native: Use the native PostgreSQL driver
        connection_name: Label of the connection
        models: Model modules to register, defaults to the fixture models

    Returns:
        Configuration dictionary for ``Tortoise.init(config=...)``
    """
    return {
        "connections": {connection_name: build_connection_config(dialect, native)},
        "apps": {
            APP_LABEL: {
                "models": models or [MODELS_MODULE],
                "default_connection": connection_name,
            },
        },
        "use_tz": False,
        "timezone": "UTC",
    }
