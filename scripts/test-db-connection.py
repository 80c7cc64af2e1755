#!/usr/bin/env python3
"""
Test database connection script for ormfixtures.

This script connects to the database of the dialect selected with DIALECT,
lists its tables and displays the connection status.
"""

import asyncio
import os
import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


async def test_database_connection(dialect: str) -> bool:
    """Connect to the dialect's database and list its tables."""
    try:
        from ormfixtures.core.database import create_database_instance
    except ImportError as e:
        print(f"❌ Import error: {e}")
        print("Make sure you're running this from the project root directory.")
        return False

    database = create_database_instance(dialect)
    connection = database.config["connections"]["default"]

    print("\nCurrent database configuration:")
    print(f"  Engine: {connection['engine']}")
    for key, value in connection["credentials"].items():
        shown = "*" * len(str(value)) if key == "password" and value else value
        print(f"  {key}: {shown}")

    print("\nTesting database connection...")
    try:
        tables = await database.show_all_tables()
        print("✅ Database connection successful!")
        print(f"Tables: {', '.join(tables) if tables else '(none)'}")
        return True
    except Exception as e:
        print(f"❌ Database connection failed: {e}")
        print("\nTroubleshooting tips:")
        print("1. Make sure the database server is running")
        print(f"2. Check config/{dialect}.env and your environment variables")
        print("3. Verify the database driver extra is installed")
        return False
    finally:
        await database.close()


def main() -> int:
    """Main function."""
    print("ormfixtures Database Connection Test")
    print("=" * 40)

    from ormfixtures.core.config import reload_config, setup_dialect_config
    from ormfixtures.core.database import get_test_dialect

    raw_dialect = os.getenv("DIALECT", "mysql")
    config_name = "postgres" if raw_dialect == "postgres-native" else raw_dialect
    loaded = setup_dialect_config(config_name)
    if loaded:
        print(f"Loaded {len(loaded)} variables from config/{config_name}.env")
        reload_config()

    dialect = get_test_dialect()
    print(f"Dialect: {dialect}")

    return 0 if asyncio.run(test_database_connection(dialect)) else 1


if __name__ == "__main__":
    sys.exit(main())
