"""Engine, session factory and the per-call transaction helper."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from wall.adapter.error import ProviderError
from wall.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Build the async engine shared by both Postgres repositories.

    SQL echo follows ``DEBUG``. Stale pooled connections are pinged before
    reuse because live views can sit idle between polls.
    """
    pool = settings.database
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=pool.pool_size,
        max_overflow=pool.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # Rows are mapped to frozen models right away, so nothing needs refreshing
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)


@asynccontextmanager
async def transaction(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    """Run one repository call in its own short transaction.

    Live views stay mounted for a long time, so sessions are never held
    open between calls. Backend failures surface as ProviderError carrying
    the driver's own message.

    Args:
        session_factory: Factory for creating sessions

    Yields:
        Database session inside a transaction
    """
    try:
        async with session_factory() as session, session.begin():
            yield session
    except SQLAlchemyError as e:
        raise ProviderError(str(getattr(e, "orig", None) or e)) from e
    except OSError as e:
        raise ProviderError(str(e)) from e
