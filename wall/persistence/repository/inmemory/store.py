"""Shared in-memory backing store for testing.

Feedback and vote repositories share one store so the aggregated view can
be computed, and every write is announced on the in-memory change feed the
same way the database triggers announce it in production.
"""

from collections import Counter
from typing import Optional

from wall.adapter.error import ProviderError
from wall.adapter.realtime.inmemory import InMemoryChangeFeed
from wall.domain.model import Feedback, Vote
from wall.domain.value import ChangeEvent, Collection, FeedbackId


class InMemoryStore:
    """Rows, call counters and failure injection for in-memory repositories."""

    def __init__(self, change_feed: Optional[InMemoryChangeFeed] = None) -> None:
        self.feedback: dict[FeedbackId, Feedback] = {}
        self.votes: list[Vote] = []
        self.change_feed = change_feed
        # Repository method names that should raise ProviderError
        self.fail_on: set[str] = set()
        self.calls: Counter[str] = Counter()

    def record(self, operation: str) -> None:
        """Count a repository call and raise if it is set to fail."""
        self.calls[operation] += 1
        if operation in self.fail_on:
            raise ProviderError(f"{operation} unavailable")

    def emit(self, collection: Collection, event: ChangeEvent) -> None:
        if self.change_feed is not None:
            self.change_feed.emit(collection, event)
