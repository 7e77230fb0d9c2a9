"""Database configuration and connection management."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, AsyncIterator

from sqlalchemy.exc import (
    DBAPIError,
    InterfaceError,
    OperationalError,
    SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import NullPool

from swaproom import config
from swaproom.exceptions import StorageUnavailableError

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Base class for SQLAlchemy models."""

    pass


if not config.DATABASE_URL:
    raise ValueError("DATABASE_URL environment variable is required")


def _create_engine():
    # aiosqlite is not well served by connection pooling
    if config.DATABASE_URL.startswith("sqlite"):
        return create_async_engine(
            config.DATABASE_URL, echo=config.SQL_DEBUG, poolclass=NullPool
        )
    return create_async_engine(
        config.DATABASE_URL, echo=config.SQL_DEBUG, pool_pre_ping=True
    )


# Create async engine
engine = _create_engine()

# Create session factory
AsyncSessionLocal = async_sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Dependency to get database session."""
    async with AsyncSessionLocal() as session:
        try:
            yield session
        finally:
            await session.close()


# Routers depend on this name
db_session = get_db


def is_storage_failure(error: BaseException) -> bool:
    """Tell infrastructure failures apart from errors about the data itself."""
    if isinstance(error, (OperationalError, InterfaceError, OSError)):
        return True
    return isinstance(error, DBAPIError) and error.connection_invalidated


@asynccontextmanager
async def unit_of_work(db: AsyncSession) -> AsyncIterator[AsyncSession]:
    """Run one service operation against the session.

    Any failure rolls the open transaction back. Connection-level failures
    are re-raised as StorageUnavailableError; everything else propagates as is.
    """
    try:
        yield db
    except Exception as error:
        try:
            await db.rollback()
        except (SQLAlchemyError, OSError):
            logger.warning("Rollback failed after %r", error, exc_info=True)
        if is_storage_failure(error):
            logger.warning("Storage unavailable: %s", error)
            raise StorageUnavailableError() from error
        raise


async def init_db() -> None:
    """Initialize database connection on startup."""
    # Schema is owned by alembic migrations
    logger.info("Database engine ready (%s)", engine.url.get_backend_name())


async def close_db() -> None:
    """Close database connections on shutdown."""
    await engine.dispose()
