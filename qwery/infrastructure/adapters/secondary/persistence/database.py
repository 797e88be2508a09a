import logging
from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from qwery.configuration.config import get_settings

logger = logging.getLogger(__name__)
settings = get_settings()


def enable_sqlite_foreign_keys(target: AsyncEngine) -> AsyncEngine:
    """Turn on foreign key enforcement for every SQLite connection of ``target``."""
    if target.dialect.name != "sqlite":
        return target

    @event.listens_for(target.sync_engine, "connect")
    def set_sqlite_pragma(dbapi_connection: Any, connection_record: Any) -> None:
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return target


engine = enable_sqlite_foreign_keys(
    create_async_engine(settings.database_url, echo=settings.database_echo)
)

async_session_factory = async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)


async def get_db() -> AsyncGenerator[Any, None]:
    """
    Dependency that provides a database session.

    Repositories commit their own writes; the session is closed when the
    request finishes.
    """
    session = async_session_factory()
    try:
        yield session
    finally:
        await session.close()


async def initialize_database(bind: AsyncEngine | None = None) -> None:
    """Create all tables defined in the SQLAlchemy models."""
    from qwery.infrastructure.adapters.secondary.persistence.models import Base

    target = bind or engine
    logger.info("Initializing database schema...")
    async with target.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema initialized")


async def dispose_database() -> None:
    await engine.dispose()
