"""
Setup helpers for ORM test suites.

``init_tests`` builds and clears a database for the dialect under test and
hands it to the caller's callbacks; ``init_test_data`` additionally declares
the fixture models, creates their tables and installs a dummy trigger.
"""

import inspect
import re
from types import SimpleNamespace
from typing import Any, Awaitable, Callable, Mapping, Optional, Union

from ..core.database.cleanup import clear_database
from ..core.database.connection import FixtureDatabase, create_database_instance
from ..core.database.dialects import get_test_dialect
from ..core.database.models import HistoryLog, ParanoidUser, User
from ..core.database.triggers import get_dummy_create_trigger_statement
from ..core.errors import (
    InvalidOptionsError,
    UndefinedExpectationError,
    create_error_response,
)
from ..core.logging import QueryLogging, log_fixture_step

Callback = Callable[..., Union[Any, Awaitable[Any]]]


async def _call(callback: Callback, *args: Any) -> Any:
    result = callback(*args)
    if inspect.isawaitable(result):
        result = await result
    return result


async def init_tests(
    *,
    on_complete: Optional[Callback] = None,
    on_error: Optional[Callback] = None,
    dialect: Optional[str] = None,
    logging: QueryLogging = False,
    before_complete: Optional[Callback] = None,
    context: Any = None,
) -> None:
    """
    Create and clear a test database, then hand it to the callbacks.

    Every failure after the argument check is passed to ``on_error`` rather
    than raised. Callbacks may be plain functions or coroutine functions.

    Args:
        on_complete: Called with the database once it is ready
        on_error: Called with the exception if any step fails
        dialect: Dialect name, defaults to ``mysql``
        logging: SQL logging option (False, True or a callable)
        before_complete: Called with the database before ``on_complete``
        context: Object that receives the database as ``context.database``
            as soon as it is built, so the caller can close it after a failure

    Raises:
        InvalidOptionsError: If ``on_complete`` or ``on_error`` is missing
    """
    if on_complete is None or on_error is None:
        raise InvalidOptionsError(
            "options.on_complete+on_error required", source="init_tests"
        )

    step = "create_instance"
    database: Optional[FixtureDatabase] = None
    try:
        database = create_database_instance(dialect=dialect, logging=logging)
        if context is not None:
            context.database = database

        step = "clear_database"
        log_fixture_step(step, database.dialect)
        await clear_database(database)

        step = "complete"
        if before_complete is not None:
            await _call(before_complete, database)
        await _call(on_complete, database)
        log_fixture_step(step, database.dialect, status="completed")
    except Exception as e:
        log_fixture_step(
            step,
            database.dialect if database else (dialect or "mysql"),
            status="failed",
            details=create_error_response(e, source="init_tests"),
        )
        await _call(on_error, e)


async def init_test_data(test: Any = None, dialect: Optional[str] = None) -> Any:
    """
    Prepare a database holding the fixture tables and a dummy trigger.

    The database and the ``User``, ``HistoryLog`` and ``ParanoidUser`` models
    are attached to ``test``. ``test.database`` is set even when preparation
    fails, so the caller can close it.

    Args:
        test: Object to populate, a new namespace when omitted
        dialect: Dialect name, defaults to the dialect under test

    Returns:
        The populated ``test`` object

    Raises:
        Exception: The first error raised while preparing the database
    """
    test = test if test is not None else SimpleNamespace()
    errors: list[BaseException] = []

    def attach_models(database: FixtureDatabase) -> None:
        test.User = User
        test.HistoryLog = HistoryLog
        test.ParanoidUser = ParanoidUser

    async def create_schema(database: FixtureDatabase) -> None:
        await database.sync()
        trigger = get_dummy_create_trigger_statement(
            HistoryLog._meta.db_table, dialect=database.dialect
        )
        await database.execute_script(trigger)

    await init_tests(
        dialect=dialect or get_test_dialect(),
        before_complete=attach_models,
        on_complete=create_schema,
        on_error=errors.append,
        context=test,
    )

    if errors:
        raise errors[0]
    return test


def check_match_for_dialects(
    dialect: str, value: str, expectations: Mapping[str, str]
) -> None:
    """
    Assert that a value matches the pattern expected for a dialect.

    Args:
        dialect: Dialect under test
        value: Value to check, typically generated SQL
        expectations: Regular expression per dialect

    Raises:
        UndefinedExpectationError: If there is no pattern for the dialect
        AssertionError: If the value does not match the pattern
    """
    if dialect not in expectations:
        raise UndefinedExpectationError(dialect, source="check_match_for_dialects")

    pattern = expectations[dialect]
    if not re.search(pattern, value):
        raise AssertionError(f"{value!r} does not match {pattern!r}")
