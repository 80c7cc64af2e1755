"""
Teardown of the fixture databases between test runs.
"""

from pathlib import Path
from typing import Optional, Union

from ..config import get_config
from ..logging import get_logger
from .connection import FixtureDatabase

logger = get_logger("core.database.cleanup")


def remove_stray_files(directory: Union[str, Path]) -> list[Path]:
    """
    Delete the regular files directly inside a directory.

    Sub-directories and their contents are left alone. A directory that is
    missing or cannot be listed is treated as empty.

    Returns:
        The files that were removed
    """
    directory = Path(directory)
    try:
        entries = list(directory.iterdir())
    except OSError as e:
        logger.debug(
            "Scratch directory not readable", directory=str(directory), error=str(e)
        )
        return []

    removed = []
    for entry in entries:
        if entry.is_file():
            entry.unlink()
            removed.append(entry)
    return removed


async def clear_database(
    database: Optional[FixtureDatabase],
    directory: Optional[Union[str, Path]] = None,
) -> None:
    """
    Drop every table and empty the scratch directory.

    Args:
        database: Instance to clear; ``None`` makes this a no-op
        directory: Scratch directory, defaults to ``TEST_DIRECTORY``

    Raises:
        Exception: Whatever the driver raised while dropping the tables
    """
    if database is None:
        return

    await database.drop_all_tables()

    directory = directory or get_config().test.directory
    removed = remove_stray_files(directory)
    if removed:
        logger.info(
            "Removed stray files",
            directory=str(directory),
            files=[path.name for path in removed],
        )
