"""
ormfixtures - database fixtures for ORM test suites

Builds per-dialect test databases on top of Tortoise ORM, declares the
fixture models, clears state between runs and hands out dummy trigger SQL.
"""

__version__ = "0.1.0"
__description__ = "Per-dialect database fixtures for ORM test suites"

# Core imports
from .core.config import OrmFixturesConfig
from .core.logging import setup_logging

# Initialize logging
setup_logging()

__all__ = [
    "__version__",
    "__description__",
    "OrmFixturesConfig",
    "setup_logging",
]
