"""SQLAlchemy database session and engine configuration."""

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from app.config import get_settings

SQLITE_BUSY_TIMEOUT_SECONDS = 30


def _get_async_url(url: str) -> str:
    """Convert a sync SQLAlchemy URL to an async one."""
    if url.startswith("sqlite:///"):
        return url.replace("sqlite:///", "sqlite+aiosqlite:///", 1)
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return url


def _configure_sqlite(engine: AsyncEngine) -> None:
    """Make SQLite behave like the row-locking databases the repositories expect.

    pysqlite/aiosqlite defer BEGIN until the first write, so two rating
    transactions could both read a store before either writes it. Emitting
    BEGIN IMMEDIATE takes the write lock up front; a second writer waits up
    to the busy timeout instead of reading stale aggregates.
    """

    @event.listens_for(engine.sync_engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine.sync_engine, "begin")
    def _on_begin(conn):
        conn.exec_driver_sql("BEGIN IMMEDIATE")


def create_engine_for(url: str, *, echo: bool = False) -> AsyncEngine:
    """Build an async engine for ``url`` (sync-style URLs are converted)."""
    async_url = _get_async_url(url)
    if async_url.startswith("sqlite"):
        engine = create_async_engine(
            async_url,
            echo=echo,
            connect_args={"timeout": SQLITE_BUSY_TIMEOUT_SECONDS},
        )
        _configure_sqlite(engine)
        return engine
    return create_async_engine(async_url, echo=echo, pool_pre_ping=True)


def create_session_factory(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind, class_=AsyncSession, expire_on_commit=False)


settings = get_settings()

engine = create_engine_for(settings.database_url)

async_session_factory = create_session_factory(engine)
