"""
Global database session and engine management.

This module manages the global AsyncEngine and async_sessionmaker instances
that are used throughout the application for database access.
"""

from __future__ import annotations

from typing import AsyncGenerator, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from person_service.core.errors import DatabaseConnectionError
from person_service.core.logging_config import get_logger
from person_service.server.core.config import settings

from .utils import create_all, create_engine, create_sessionmaker

logger = get_logger(__name__)

# Create global engine and session factory
engine = create_engine(settings.database_url)
async_session_maker = create_sessionmaker(engine)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency generator for database sessions.

    Yields:
        AsyncSession: An asynchronous SQLAlchemy session.
    """
    async with async_session_maker() as session:
        yield session


async def init_db(bind: Optional[AsyncEngine] = None) -> None:
    """
    Connect to the database and create any missing tables.

    Args:
        bind: Engine to use instead of the global one.

    Raises:
        DatabaseConnectionError: The database is unreachable or rejected the DDL.
    """
    target = bind or engine
    try:
        await create_all(target)
    except (SQLAlchemyError, OSError) as e:
        raise DatabaseConnectionError(str(e)) from e
    logger.info("successfully connected to database")


async def close_db(bind: Optional[AsyncEngine] = None) -> None:
    """Dispose of the connection pool."""
    await (bind or engine).dispose()
    logger.info("Database connections closed")
