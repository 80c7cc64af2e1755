"""
Pytest configuration and fixtures for the ormfixtures tests.

Unit tests need no database server. Integration tests run against SQLite
by default and against server dialects through testcontainers.
"""

from pathlib import Path
from typing import Iterator

import pytest

from ormfixtures.core.config import reload_config

pytest_plugins = ["pytester"]


@pytest.fixture(autouse=True)
def restore_config() -> Iterator[None]:
    """Rebuild the cached configuration once the test's env changes are undone."""
    yield
    reload_config()


@pytest.fixture
def sqlite_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Select SQLite with storage and scratch directory under tmp_path."""
    monkeypatch.setenv("DIALECT", "sqlite")
    monkeypatch.setenv("SQLITE_STORAGE", str(tmp_path / "db" / "test.sqlite"))
    monkeypatch.setenv("TEST_DIRECTORY", str(tmp_path / "output"))
    monkeypatch.delenv("TEST_DATABASE_URL", raising=False)
    reload_config()
    return tmp_path


def pytest_collection_modifyitems(config, items):
    """Add markers to tests based on their location."""
    for item in items:
        if "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
        elif "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
