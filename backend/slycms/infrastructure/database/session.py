"""SQLAlchemy database engine and per-operation session scopes."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from slycms.config import Settings
from slycms.domain.exceptions import StorageError
from slycms.infrastructure.database.base import Base

logger = logging.getLogger(__name__)


def build_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine for the configured SQLite file."""
    return create_async_engine(
        settings.database_url,
        echo=False,
        future=True,
    )


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@asynccontextmanager
async def session_scope(
    factory: async_sessionmaker[AsyncSession],
    operation: str,
) -> AsyncIterator[AsyncSession]:
    """One unit of work: commit on success, roll back on error, always release.

    Driver and SQL errors leave the scope as StorageError; domain errors
    raised by the caller pass through unchanged after the rollback.
    """
    try:
        async with factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise
    except SQLAlchemyError as exc:
        raise StorageError(operation, exc) from exc


async def init_schema(engine: AsyncEngine) -> None:
    """Create the articles and profile tables if they do not exist yet."""
    # Importing the models registers their tables on Base.metadata
    from slycms.infrastructure.database import models  # noqa: F401

    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    except SQLAlchemyError as exc:
        raise StorageError("schema creation", exc) from exc
    logger.info("Schema ready: %s", ", ".join(sorted(Base.metadata.tables)))
