"""
Configuration management for the ORM fixture helpers.

This module provides the environment-aware settings used to build test
database instances: one connection block per SQL dialect, the scratch
directory cleaned between runs, and the logging options.
"""

import tempfile
from pathlib import Path
from typing import Optional, Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..errors import UnknownDialectError

_TEMP_ROOT = Path(tempfile.gettempdir()) / "ormfixtures"


class LoggingConfig(BaseSettings):
    """Configuration for logging system."""

    level: str = Field(default="INFO", description="Logging level")
    json_output: bool = Field(default=False, description="Output logs in JSON format")
    log_file: Optional[Path] = Field(default=None, description="Log file path")

    model_config = SettingsConfigDict(env_prefix="LOG_")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Normalize and validate the logging level name."""
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in allowed:
            raise ValueError(f"Logging level must be one of: {allowed}")
        return v.upper()


class MySQLConfig(BaseSettings):
    """Connection settings for the MySQL test database."""

    host: str = Field(default="127.0.0.1", description="Database host")
    port: int = Field(default=3306, description="Database port")
    username: str = Field(default="root", description="Database username")
    password: str = Field(default="", description="Database password")
    database: str = Field(default="ormfixtures_test", description="Database name")
    charset: str = Field(default="utf8mb4", description="Connection charset")

    model_config = SettingsConfigDict(env_prefix="MYSQL_")


class PostgresConfig(BaseSettings):
    """Connection settings for the PostgreSQL test database."""

    host: str = Field(default="127.0.0.1", description="Database host")
    port: int = Field(default=5432, description="Database port")
    username: str = Field(default="postgres", description="Database username")
    password: str = Field(default="postgres", description="Database password")
    database: str = Field(default="ormfixtures_test", description="Database name")

    model_config = SettingsConfigDict(env_prefix="POSTGRES_")


class MSSQLConfig(BaseSettings):
    """Connection settings for the SQL Server test database."""

    host: str = Field(default="127.0.0.1", description="Database host")
    port: int = Field(default=1433, description="Database port")
    username: str = Field(default="sa", description="Database username")
    password: str = Field(default="Password12!", description="Database password")
    database: str = Field(default="ormfixtures_test", description="Database name")
    driver: str = Field(
        default="ODBC Driver 18 for SQL Server", description="ODBC driver name"
    )
    trust_server_certificate: bool = Field(
        default=True, description="Accept the server's self-signed certificate"
    )

    model_config = SettingsConfigDict(env_prefix="MSSQL_")


class SQLiteConfig(BaseSettings):
    """Storage settings for the SQLite test database."""

    storage: Path = Field(
        default=_TEMP_ROOT / "test.sqlite", description="SQLite database file"
    )

    model_config = SettingsConfigDict(env_prefix="SQLITE_")


DialectConfig = Union[MySQLConfig, PostgresConfig, MSSQLConfig, SQLiteConfig]


class TestConfig(BaseSettings):
    """Configuration for the test run itself."""

    __test__ = False

    directory: Path = Field(
        default=_TEMP_ROOT / "output",
        description="Scratch directory emptied after the tables are dropped",
    )
    default_dialect: str = Field(
        default="mysql", description="Dialect used when DIALECT is not set"
    )
    database_url: Optional[str] = Field(
        default=None,
        description="SQLAlchemy-style URL overriding the matching dialect block",
    )

    model_config = SettingsConfigDict(env_prefix="TEST_")


class OrmFixturesConfig(BaseSettings):
    """Main configuration class for the fixture helpers."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    mysql: MySQLConfig = Field(default_factory=MySQLConfig)
    postgres: PostgresConfig = Field(default_factory=PostgresConfig)
    mssql: MSSQLConfig = Field(default_factory=MSSQLConfig)
    sqlite: SQLiteConfig = Field(default_factory=SQLiteConfig)
    test: TestConfig = Field(default_factory=TestConfig)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_nested_delimiter="__",
    )

    def get_dialect_config(self, dialect: str) -> DialectConfig:
        """
        Get the connection block for a dialect.

        Args:
            dialect: Dialect name (mysql, postgres, mssql, sqlite)

        Returns:
            The dialect's connection settings

        Raises:
            UnknownDialectError: If no block exists for the dialect
        """
        blocks = {
            "mysql": self.mysql,
            "postgres": self.postgres,
            "mssql": self.mssql,
            "sqlite": self.sqlite,
        }
        try:
            return blocks[dialect]
        except KeyError:
            raise UnknownDialectError(dialect, source="config") from None


# Global configuration instance
_config: Optional[OrmFixturesConfig] = None


def get_config() -> OrmFixturesConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = OrmFixturesConfig()
    return _config


def set_config(config: OrmFixturesConfig) -> None:
    """Set the global configuration instance."""
    global _config
    _config = config


def reload_config() -> OrmFixturesConfig:
    """Reload configuration from environment variables."""
    global _config
    _config = OrmFixturesConfig()
    return _config


def get_dialect_config(dialect: str) -> DialectConfig:
    """Get the connection block for a dialect from the global configuration."""
    return get_config().get_dialect_config(dialect)
