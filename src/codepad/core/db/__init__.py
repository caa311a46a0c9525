"""Database utilities - store client and bounded operations."""

from src.codepad.core.db.engine import Database, create_engine_from_settings
from src.codepad.core.db.session import store_timeout

__all__ = [
    "Database",
    "create_engine_from_settings",
    "store_timeout",
]
