"""Database package."""
from gymlog.db.database import (
    Base,
    async_session_maker,
    close_engine,
    enable_sqlite_foreign_keys,
    engine,
    get_db,
    init_db,
)

__all__ = [
    "Base",
    "async_session_maker",
    "close_engine",
    "enable_sqlite_foreign_keys",
    "engine",
    "get_db",
    "init_db",
]
