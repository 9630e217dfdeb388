"""Database connection and session management.

Provides async database engine and session factory for PostgreSQL, plus the
translation of driver failures into the domain's StoreError.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

import logfire
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from inkwell.config import Settings
from inkwell.domain.error import StoreError


def create_engine(settings: Settings) -> AsyncEngine:
    """Create async database engine.

    Args:
        settings: Application settings with database URL

    Returns:
        Configured async engine
    """
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,  # Log SQL queries in debug mode
        pool_pre_ping=True,  # Verify connections before using
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create async session factory.

    Args:
        engine: Database engine

    Returns:
        Session factory for creating database sessions
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,  # Don't expire objects after commit
        autoflush=False,  # Manual flushing for better control
        autocommit=False,  # Explicit transaction management
    )


@asynccontextmanager
async def store_errors(session: AsyncSession, operation: str) -> AsyncIterator[None]:
    """Re-raise SQLAlchemy failures inside the block as StoreError.

    The session is rolled back first so the request commits nothing.

    Args:
        session: Session the block runs in
        operation: Name of the repository operation, for the log record

    Raises:
        StoreError: If the block raised a SQLAlchemyError
    """
    try:
        yield
    except SQLAlchemyError as e:
        logfire.error("Store operation failed", operation=operation, error=str(e))
        await session.rollback()
        raise StoreError(f"{operation} failed") from e
