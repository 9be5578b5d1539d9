"""Mock persistence providers for testing."""

from dishka import Scope, provide

from wall.adapter.realtime import InMemoryChangeFeed
from wall.domain.repository import FeedbackRepository, VoteRepository
from wall.persistence.repository.inmemory import (
    InMemoryFeedbackRepository,
    InMemoryStore,
    InMemoryVoteRepository,
)
from wall.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses REQUEST scope to ensure test isolation - each test gets fresh repositories.
    Both repositories share one store, which announces writes on the
    in-memory change feed.
    """

    __is_mock__ = True

    @provide(scope=Scope.REQUEST)
    def get_store(self, change_feed: InMemoryChangeFeed) -> InMemoryStore:
        """Provide shared in-memory store."""
        return InMemoryStore(change_feed=change_feed)

    @provide(scope=Scope.REQUEST)
    def get_feedback_repository(self, store: InMemoryStore) -> FeedbackRepository:
        """Provide in-memory feedback repository."""
        return InMemoryFeedbackRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, store: InMemoryStore) -> VoteRepository:
        """Provide in-memory vote repository."""
        return InMemoryVoteRepository(store)
