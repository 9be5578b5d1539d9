"""Live reconciler: refresh a view whenever its backing collections change.

Lifecycle is ``idle -> subscribed -> torn_down``. While subscribed, every
change notification and every poll tick runs the view's refresh function.
Refreshes never overlap: a trigger that arrives while one is running marks
it pending and exactly one more refresh follows, so the final state after a
burst always reflects the whole burst.

Teardown closes the notification channel and cancels the listener and poll
tasks before the first await, so a notification delivered afterwards has
nowhere to go.
"""

import asyncio
from enum import Enum
from typing import Awaitable, Callable, Optional, Sequence

import logfire

from wall.adapter.realtime import (
    DEFAULT_CHANNEL_MAXSIZE,
    ChangeFeed,
    NotificationChannel,
    Subscription,
)
from wall.config import RealtimeSettings
from wall.domain.value import Collection

RefreshFn = Callable[[], Awaitable[object]]

WATCHED_COLLECTIONS = (Collection.FEEDBACK, Collection.VOTES)


class ReconcilerState(str, Enum):
    """Lifecycle state of a reconciler."""

    IDLE = "idle"
    SUBSCRIBED = "subscribed"
    TORN_DOWN = "torn_down"


class Reconciler:
    """Keeps one mounted view in sync with backend changes."""

    def __init__(
        self,
        change_feed: ChangeFeed,
        refresh: RefreshFn,
        collections: Sequence[Collection] = WATCHED_COLLECTIONS,
        poll_interval: Optional[float] = 3.0,
        debounce: float = 0.0,
        channel_maxsize: int = DEFAULT_CHANNEL_MAXSIZE,
        name: str = "view",
    ) -> None:
        """Initialize reconciler.

        Args:
            change_feed: Source of change notifications
            refresh: Coroutine function re-running fetch and rank for the view
            collections: Collections to subscribe to
            poll_interval: Seconds between backstop refreshes, None or <= 0 disables
            debounce: Seconds to wait after a notification before refreshing
            channel_maxsize: Notification queue bound
            name: View name used in logs
        """
        self.change_feed = change_feed
        self.collections = tuple(collections)
        # Non-positive intervals would spin the poll task
        if poll_interval is not None and poll_interval <= 0:
            poll_interval = None
        self.poll_interval = poll_interval
        self.debounce = debounce
        self.channel_maxsize = channel_maxsize
        self.name = name
        self.refresh_count = 0

        self._refresh = refresh
        self._state = ReconcilerState.IDLE
        self._channel: Optional[NotificationChannel] = None
        self._subscriptions: list[Subscription] = []
        self._tasks: list[asyncio.Task] = []
        self._refreshing = False
        self._pending = False
        self._idle = asyncio.Event()
        self._idle.set()

    @classmethod
    def from_settings(
        cls,
        change_feed: ChangeFeed,
        refresh: RefreshFn,
        settings: RealtimeSettings,
        collections: Sequence[Collection] = WATCHED_COLLECTIONS,
        name: str = "view",
    ) -> "Reconciler":
        return cls(
            change_feed,
            refresh,
            collections=collections,
            poll_interval=settings.poll_interval,
            debounce=settings.debounce,
            channel_maxsize=settings.channel_maxsize,
            name=name,
        )

    @property
    def state(self) -> ReconcilerState:
        return self._state

    @property
    def subscriptions(self) -> list[Subscription]:
        return list(self._subscriptions)

    async def start(self) -> None:
        """Open subscriptions and start the listener and poll tasks.

        Raises:
            RuntimeError: If already started or torn down
            SubscriptionError: If a subscription cannot be opened; anything
                opened so far is closed and the reconciler is torn down
        """
        if self._state is not ReconcilerState.IDLE:
            raise RuntimeError(f"Reconciler {self.name} is {self._state.value}")

        channel = NotificationChannel(maxsize=self.channel_maxsize)
        self._channel = channel

        with logfire.span("reconciler_start", view=self.name):
            try:
                for collection in self.collections:
                    subscription = await self.change_feed.subscribe(collection, channel)
                    self._subscriptions.append(subscription)
                    if self._state is ReconcilerState.TORN_DOWN:
                        # stop() ran while we were subscribing
                        await self._close_subscriptions()
                        return
            except BaseException:
                await self.stop()
                raise

            self._state = ReconcilerState.SUBSCRIBED
            self._tasks.append(
                asyncio.create_task(self._listen(channel), name=f"{self.name}-listen")
            )
            if self.poll_interval:
                self._tasks.append(
                    asyncio.create_task(
                        self._poll(self.poll_interval), name=f"{self.name}-poll"
                    )
                )

    async def stop(self) -> None:
        """Tear down. Idempotent and safe from any state.

        Everything that stops reactions happens synchronously; awaiting is
        only needed to release transport resources.
        """
        self._state = ReconcilerState.TORN_DOWN
        if self._channel is not None:
            self._channel.close()

        current = asyncio.current_task()
        tasks, self._tasks = self._tasks, []
        for task in tasks:
            if task is not current:
                task.cancel()

        try:
            await asyncio.gather(
                *(task for task in tasks if task is not current),
                return_exceptions=True,
            )
        finally:
            await self._close_subscriptions()

    async def request_refresh(self, reason: str = "manual") -> None:
        """Refresh now, coalescing with any refresh already running."""
        await self._trigger(reason)

    async def wait_idle(self) -> None:
        """Wait until no refresh is running or queued behind a running one.

        Must not be awaited from inside the refresh function.
        """
        await self._idle.wait()

    async def _close_subscriptions(self) -> None:
        subscriptions, self._subscriptions = self._subscriptions, []
        for subscription in subscriptions:
            try:
                await subscription.close()
            except Exception:
                logfire.exception(
                    "Failed to close subscription",
                    view=self.name,
                    collection=subscription.collection.value,
                )

    async def _listen(self, channel: NotificationChannel) -> None:
        async for notification in channel:
            burst = 1
            if self.debounce > 0:
                await asyncio.sleep(self.debounce)
                burst += len(channel.drain())
            logfire.debug(
                "Change notification",
                view=self.name,
                collection=notification.collection.value,
                event=notification.event.value,
                burst=burst,
            )
            await self._trigger(notification.collection.value)

    async def _poll(self, interval: float) -> None:
        while True:
            await asyncio.sleep(interval)
            await self._trigger("poll")

    async def _trigger(self, reason: str) -> None:
        if self._state is not ReconcilerState.SUBSCRIBED:
            return
        if self._refreshing:
            self._pending = True
            return

        self._refreshing = True
        self._idle.clear()
        try:
            while True:
                self._pending = False
                await self._run_refresh(reason)
                if not self._pending or self._state is not ReconcilerState.SUBSCRIBED:
                    break
                reason = "pending"
        finally:
            self._refreshing = False
            self._idle.set()

    async def _run_refresh(self, reason: str) -> None:
        self.refresh_count += 1
        try:
            with logfire.span("reconcile", view=self.name, reason=reason):
                await self._refresh()
        except Exception:
            # Keep listening; the next notification or poll tick retries
            logfire.exception("Live refresh failed", view=self.name, reason=reason)
