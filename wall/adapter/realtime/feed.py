"""Realtime change feed interface."""

from abc import ABC, abstractmethod

from wall.adapter.realtime.channel import NotificationChannel
from wall.domain.value import Collection


class Subscription(ABC):
    """Handle for one open change subscription."""

    def __init__(self, collection: Collection, channel: NotificationChannel) -> None:
        self.collection = collection
        self.channel = channel

    @property
    @abstractmethod
    def closed(self) -> bool:
        """Whether close() has completed."""
        pass

    @abstractmethod
    async def close(self) -> None:
        """Stop receiving notifications and release transport resources.

        Must be idempotent.
        """
        pass


class ChangeFeed(ABC):
    """Source of insert/update/delete notifications for record collections."""

    @abstractmethod
    async def subscribe(
        self, collection: Collection, channel: NotificationChannel
    ) -> Subscription:
        """Deliver every change on a collection into a channel.

        Args:
            collection: Collection to watch (all event kinds)
            channel: Channel notifications are published to

        Returns:
            Open subscription handle

        Raises:
            SubscriptionError: If the subscription cannot be opened
        """
        pass
