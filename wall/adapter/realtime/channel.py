"""Notification channel between realtime subscriptions and a live view.

Subscriptions publish into the channel from transport callbacks; the
reconciler reads from it. Closing the channel discards anything still queued
and rejects every later publish, so nothing delivered after teardown can
reach the reader.
"""

import asyncio
import logging
from typing import Any

from wall.domain.value import ChangeNotification

logger = logging.getLogger(__name__)

# Maximum notifications queued per channel to prevent unbounded growth
DEFAULT_CHANNEL_MAXSIZE = 1000

_CLOSED: Any = object()


class NotificationChannel:
    """Bounded single-reader queue of change notifications."""

    def __init__(self, maxsize: int = DEFAULT_CHANNEL_MAXSIZE):
        # One extra slot so the close marker always fits
        self._queue: asyncio.Queue = asyncio.Queue(maxsize=maxsize + 1)
        self._maxsize = maxsize
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def publish(self, notification: ChangeNotification) -> bool:
        """Queue a notification.

        Safe to call from sync transport callbacks on the event loop thread.

        Returns:
            True if queued, False if the channel is closed or full
        """
        if self._closed:
            logger.debug(
                "Dropping %s on %s: channel closed",
                notification.event.value,
                notification.collection.value,
            )
            return False
        if self._queue.qsize() >= self._maxsize:
            # Payloads are never read, a full queue already guarantees a refresh
            logger.debug("Notification channel full, dropping notification")
            return False
        self._queue.put_nowait(notification)
        return True

    def drain(self) -> list[ChangeNotification]:
        """Remove and return every notification queued right now."""
        drained: list[ChangeNotification] = []
        while True:
            try:
                item = self._queue.get_nowait()
            except asyncio.QueueEmpty:
                return drained
            if item is _CLOSED:
                # Keep the marker for the reader
                self._queue.put_nowait(_CLOSED)
                return drained
            drained.append(item)

    def close(self) -> None:
        """Close the channel. Idempotent and synchronous."""
        if self._closed:
            return
        self._closed = True
        discarded = self.drain()
        if discarded:
            logger.debug("Discarded %d pending notifications on close", len(discarded))
        self._queue.put_nowait(_CLOSED)

    def __aiter__(self) -> "NotificationChannel":
        return self

    async def __anext__(self) -> ChangeNotification:
        if self._closed:
            raise StopAsyncIteration
        item = await self._queue.get()
        if item is _CLOSED or self._closed:
            raise StopAsyncIteration
        return item
