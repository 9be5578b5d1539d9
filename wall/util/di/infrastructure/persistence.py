"""Persistence component: engine, sessions and the two repositories."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from wall.config import Settings
from wall.domain.repository import FeedbackRepository, VoteRepository
from wall.persistence.database import create_engine, create_session_factory
from wall.persistence.repository import (
    PostgresFeedbackRepository,
    PostgresVoteRepository,
)
from wall.util.di.base import ProviderBase
from wall.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """PostgreSQL-backed repositories sharing one engine per container.

    Repositories open a short transaction per call, so they are safe to
    share across request scopes.
    """

    __is_mock__ = False

    scope = Scope.APP

    @provide
    async def engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()
        logfire.info("Database engine disposed")

    @provide
    def session_factory(self, engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide
    def feedback_repository(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> FeedbackRepository:
        return PostgresFeedbackRepository(session_factory)

    @provide
    def vote_repository(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> VoteRepository:
        return PostgresVoteRepository(session_factory)
