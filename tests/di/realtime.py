"""Mock realtime providers for testing."""

from dishka import Scope, provide

from wall.adapter.realtime import ChangeFeed, InMemoryChangeFeed
from wall.util.di.infrastructure.realtime import RealtimeProvider


class MockRealtimeProvider(RealtimeProvider):
    """Mock realtime provider backed by an in-memory change feed."""

    __is_mock__ = True

    @provide(scope=Scope.REQUEST)
    def get_in_memory_change_feed(self) -> InMemoryChangeFeed:
        """Provide in-memory change feed, exposed so tests can emit."""
        return InMemoryChangeFeed()

    @provide(scope=Scope.REQUEST)
    def get_change_feed(self, change_feed: InMemoryChangeFeed) -> ChangeFeed:
        """Provide the same feed under the abstract type."""
        return change_feed
