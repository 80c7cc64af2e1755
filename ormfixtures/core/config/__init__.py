"""
Configuration package for the ORM fixture helpers.

This package provides centralized settings for the per-dialect test
databases, the scratch directory and logging.
"""

from .loader import (
    get_dialect_config_file,
    list_available_dialect_configs,
    load_env_file,
    setup_dialect_config,
)
from .settings import (
    DialectConfig,
    LoggingConfig,
    MSSQLConfig,
    MySQLConfig,
    OrmFixturesConfig,
    PostgresConfig,
    SQLiteConfig,
    TestConfig,
    get_config,
    get_dialect_config,
    reload_config,
    set_config,
)

__all__ = [
    # Main configuration classes
    "OrmFixturesConfig",
    "DialectConfig",
    # Component configurations
    "LoggingConfig",
    "MSSQLConfig",
    "MySQLConfig",
    "PostgresConfig",
    "SQLiteConfig",
    "TestConfig",
    # Configuration functions
    "get_config",
    "get_dialect_config",
    "reload_config",
    "set_config",
    # Dialect file loader functions
    "get_dialect_config_file",
    "list_available_dialect_configs",
    "load_env_file",
    "setup_dialect_config",
]
