"""
Dummy CREATE TRIGGER statements per dialect.

The triggers never fire any visible behavior; they exist so tests can check
that tables carrying a trigger are still handled correctly.
"""

from typing import Callable, Dict, Optional

from ..errors import MissingTriggerStatementError
from .dialects import get_test_dialect

TRIGGER_STATEMENTS: Dict[str, Callable[[str], str]] = {
    "mysql": lambda table: (
        f"CREATE TRIGGER {table}_Trigger BEFORE INSERT ON {table} "
        "FOR EACH ROW SET NEW.Id = NEW.Id"
    ),
    "postgres": lambda table: (
        "CREATE OR REPLACE FUNCTION blah() RETURNS trigger AS $$ "
        "BEGIN RETURN NEW; END; $$ LANGUAGE plpgsql; "
        f'CREATE TRIGGER "{table}_Trigger" AFTER INSERT ON "{table}" '
        "WHEN (1=0) EXECUTE PROCEDURE blah(1);"
    ),
    "mssql": lambda table: (
        f"CREATE TRIGGER {table}_Trigger ON {table} AFTER INSERT AS "
        "BEGIN SELECT 1 WHERE 1=0; END;"
    ),
    "sqlite": lambda table: (
        f"CREATE TRIGGER IF NOT EXISTS {table}_Trigger AFTER INSERT ON {table} "
        "BEGIN SELECT 1 WHERE 1=0; END;"
    ),
}


def get_dummy_create_trigger_statement(
    table_name: str, dialect: Optional[str] = None
) -> str:
    """
    Get a no-op CREATE TRIGGER statement for a table.

    Args:
        table_name: Table the trigger is attached to
        dialect: Dialect to render for, defaults to the dialect under test

    Returns:
        The dialect's trigger statement

    Raises:
        MissingTriggerStatementError: If the dialect has no statement
    """
    dialect = dialect or get_test_dialect()
    try:
        render = TRIGGER_STATEMENTS[dialect]
    except KeyError:
        raise MissingTriggerStatementError(dialect, source="triggers") from None
    return render(table_name)
