"""
Pytest fixtures for ORM test suites.

The package registers this module as a pytest plugin, so the fixtures are
available once it is installed. The async fixtures need pytest-asyncio
running in auto mode.
"""

from types import SimpleNamespace
from typing import Any, AsyncGenerator

import pytest

from ..core.database.connection import FixtureDatabase
from ..core.database.dialects import get_test_dialect
from .helpers import init_test_data, init_tests


@pytest.fixture
def orm_dialect() -> str:
    """Dialect selected through the DIALECT environment variable."""
    return get_test_dialect()


@pytest.fixture
async def orm_database(orm_dialect: str) -> AsyncGenerator[FixtureDatabase, None]:
    """A connected database for the dialect under test, with no tables."""
    context = SimpleNamespace(database=None)
    errors: list[BaseException] = []

    await init_tests(
        dialect=orm_dialect,
        context=context,
        on_complete=lambda database: None,
        on_error=errors.append,
    )
    try:
        if errors:
            raise errors[0]
        yield context.database
    finally:
        if context.database is not None:
            await context.database.close()


@pytest.fixture
async def orm_test_data(orm_dialect: str) -> AsyncGenerator[Any, None]:
    """Namespace holding the database and the fixture models."""
    test = SimpleNamespace(database=None)
    try:
        yield await init_test_data(test, dialect=orm_dialect)
    finally:
        if test.database is not None:
            await test.database.close()
