"""In-memory change feed for testing.

Paired with the in-memory store, which emits a notification for every write.
"""

import logging

from wall.adapter.error import SubscriptionError
from wall.adapter.realtime.channel import NotificationChannel
from wall.adapter.realtime.feed import ChangeFeed, Subscription
from wall.domain.value import ChangeEvent, ChangeNotification, Collection

logger = logging.getLogger(__name__)


class InMemorySubscription(Subscription):
    """Subscription registered on an InMemoryChangeFeed."""

    def __init__(
        self,
        feed: "InMemoryChangeFeed",
        collection: Collection,
        channel: NotificationChannel,
    ) -> None:
        super().__init__(collection, channel)
        self._feed = feed
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def deliver(self, event: ChangeEvent) -> bool:
        """Hand a notification to the channel.

        Also usable after close() to simulate a transport delivering late.
        """
        return self.channel.publish(
            ChangeNotification(collection=self.collection, event=event)
        )

    async def close(self) -> None:
        if self._closed:
            return
        self._feed._remove(self)
        self._closed = True


class InMemoryChangeFeed(ChangeFeed):
    """In-memory implementation of ChangeFeed for testing."""

    def __init__(self) -> None:
        self._subscriptions: list[InMemorySubscription] = []
        self.fail_subscribe_for: set[Collection] = set()

    @property
    def subscriptions(self) -> list[InMemorySubscription]:
        """Currently open subscriptions."""
        return list(self._subscriptions)

    async def subscribe(
        self, collection: Collection, channel: NotificationChannel
    ) -> InMemorySubscription:
        """Register a channel for a collection."""
        if collection in self.fail_subscribe_for:
            raise SubscriptionError(f"Cannot subscribe to {collection.value}")
        subscription = InMemorySubscription(self, collection, channel)
        self._subscriptions.append(subscription)
        return subscription

    def emit(self, collection: Collection, event: ChangeEvent) -> int:
        """Notify every open subscription on a collection.

        Returns:
            Number of channels that accepted the notification
        """
        delivered = 0
        for subscription in list(self._subscriptions):
            if subscription.collection == collection and subscription.deliver(event):
                delivered += 1
        logger.debug(
            "Emitted %s on %s to %d channels", event.value, collection.value, delivered
        )
        return delivered

    def _remove(self, subscription: InMemorySubscription) -> None:
        try:
            self._subscriptions.remove(subscription)
        except ValueError:
            pass  # Already removed
