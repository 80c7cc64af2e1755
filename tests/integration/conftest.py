"""
Integration test configuration.

The fixtures run against a SQLite file under the test's tmp_path unless a
test module overrides ``orm_dialect``.
"""

from pathlib import Path

import pytest


@pytest.fixture
def orm_dialect(sqlite_env: Path) -> str:
    """Run the plugin fixtures against SQLite."""
    return "sqlite"
