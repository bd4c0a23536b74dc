"""Database engine and session management."""
import logging

from sqlalchemy import event, make_url, text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from gymlog.config.settings import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()


def enable_sqlite_foreign_keys(db_engine: AsyncEngine) -> AsyncEngine:
    """Turn on foreign key enforcement for every new SQLite connection.

    SQLite ignores ``ON DELETE`` clauses unless the pragma is set per
    connection. Other backends are left alone.
    """
    if db_engine.dialect.name != "sqlite":
        return db_engine

    @event.listens_for(db_engine.sync_engine, "connect")
    def _set_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return db_engine


def create_engine_from_settings() -> AsyncEngine:
    """Create the database engine for the configured URL."""
    return enable_sqlite_foreign_keys(
        create_async_engine(
            settings.database_url,
            echo=settings.database_echo,
            future=True,
        )
    )


def is_file_sqlite(url: str) -> bool:
    parsed = make_url(url)
    return parsed.get_backend_name() == "sqlite" and parsed.database not in (None, "", ":memory:")


engine = create_engine_from_settings()

async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """Base class for all database models."""
    pass


async def get_db() -> AsyncSession:
    """Dependency that provides a database session.

    Commits when the request succeeds and rolls back when it raises.
    """
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def init_db(db_engine: AsyncEngine | None = None):
    """Create tables; enables WAL mode for file-backed SQLite.

    Foreign keys are enforced by the connect hook installed in
    ``enable_sqlite_foreign_keys``.
    """
    db_engine = db_engine or engine

    # Import models so their tables are registered on Base.metadata
    import gymlog.models  # noqa: F401

    if is_file_sqlite(str(db_engine.url)):
        async with db_engine.connect() as conn:
            await conn.execute(text("PRAGMA journal_mode=WAL"))
            await conn.execute(text("PRAGMA busy_timeout=30000"))
            await conn.commit()

    async with db_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database initialized at %s", db_engine.url.render_as_string(hide_password=True))


async def close_engine():
    """Dispose of the engine's connection pool."""
    await engine.dispose()
