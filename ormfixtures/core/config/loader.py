"""
Configuration loader for dialect-specific settings.

Each dialect may ship a ``config/<dialect>.env`` file at the project root
holding its connection variables (``MYSQL_HOST``, ``POSTGRES_PORT``...).
These helpers merge such a file into the process environment.
"""

import os
from pathlib import Path
from typing import Dict, Optional

PROJECT_ROOT = Path(__file__).parent.parent.parent.parent


def load_env_file(env_file_path: Path) -> Dict[str, str]:
    """
    Load environment variables from a .env file.

    Args:
        env_file_path: Path to the .env file

    Returns:
        Dictionary of environment variables
    """
    env_vars: Dict[str, str] = {}

    if not env_file_path.exists():
        return env_vars

    with open(env_file_path, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()

            # Skip empty lines and comments
            if not line or line.startswith("#"):
                continue

            if "=" in line:
                key, value = line.split("=", 1)
                key = key.strip()
                value = value.strip()

                if value.startswith('"') and value.endswith('"'):
                    value = value[1:-1]
                elif value.startswith("'") and value.endswith("'"):
                    value = value[1:-1]

                env_vars[key] = value

    return env_vars


def get_dialect_config_file(dialect: str, config_dir: Optional[Path] = None) -> Path:
    """
    Get the configuration file path for a specific dialect.

    Args:
        dialect: Dialect name (mysql, postgres, mssql, sqlite)
        config_dir: Directory holding the files, defaults to ``<root>/config``

    Returns:
        Path to the dialect-specific configuration file
    """
    config_dir = config_dir or PROJECT_ROOT / "config"
    return config_dir / f"{dialect}.env"


def setup_dialect_config(
    dialect: str, config_dir: Optional[Path] = None
) -> Dict[str, str]:
    """
    Export a dialect's configuration file into the environment.

    Variables that are already set are left untouched.

    Returns:
        The variables that were newly exported
    """
    env_vars = load_env_file(get_dialect_config_file(dialect, config_dir))

    exported = {}
    for key, value in env_vars.items():
        if key not in os.environ:
            os.environ[key] = value
            exported[key] = value

    return exported


def list_available_dialect_configs(config_dir: Optional[Path] = None) -> list[str]:
    """
    List all dialects that have a configuration file.

    Returns:
        Sorted dialect names
    """
    config_dir = config_dir or PROJECT_ROOT / "config"

    if not config_dir.exists():
        return []

    return sorted(env_file.stem for env_file in config_dir.glob("*.env"))
