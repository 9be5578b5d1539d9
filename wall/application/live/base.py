"""Base class for views that stay in sync with the backend while mounted."""

from abc import ABC, abstractmethod
from typing import Callable, Generic, Optional, TypeVar

import logfire

from wall.adapter.realtime import ChangeFeed
from wall.config import RealtimeSettings

from .reconciler import Reconciler, ReconcilerState

SnapshotT = TypeVar("SnapshotT")


class LiveView(ABC, Generic[SnapshotT]):
    """A snapshot that is rebuilt from scratch on every backend change.

    The view is used as an async context manager: entering mounts it
    (subscribe, then initial load) and leaving unmounts it. Each snapshot
    replaces the previous one wholesale and is handed to ``on_change``.
    """

    name = "view"

    def __init__(
        self,
        change_feed: ChangeFeed,
        settings: RealtimeSettings,
        on_change: Optional[Callable[[SnapshotT], None]] = None,
    ) -> None:
        self.on_change = on_change
        self._snapshot: Optional[SnapshotT] = None
        self._reconciler = Reconciler.from_settings(
            change_feed, self._reconcile, settings, name=self.name
        )

    @property
    def state(self) -> ReconcilerState:
        return self._reconciler.state

    @property
    def reconciler(self) -> Reconciler:
        return self._reconciler

    @property
    def snapshot(self) -> Optional[SnapshotT]:
        """Latest snapshot, None until the first load completes."""
        return self._snapshot

    @property
    def loading(self) -> bool:
        return self._snapshot is None

    @abstractmethod
    async def load(self) -> SnapshotT:
        """Build a fresh snapshot from the backend."""
        pass

    async def refresh(self) -> SnapshotT:
        """Load a new snapshot and show it, unless the view was unmounted.

        Returns:
            The freshly loaded snapshot
        """
        snapshot = await self.load()
        if self._reconciler.state is not ReconcilerState.TORN_DOWN:
            self._snapshot = snapshot
            if self.on_change is not None:
                self.on_change(snapshot)
        return snapshot

    async def _reconcile(self) -> None:
        await self.refresh()

    async def mount(self) -> None:
        """Subscribe to changes, then load the first snapshot.

        Subscribing first guarantees that a change landing between the
        initial load and the subscription is not missed.
        """
        await self._reconciler.start()
        logfire.info("View mounted", view=self.name)
        await self._reconciler.request_refresh("mount")
        # A notification-driven refresh may have absorbed ours; wait for it
        await self._reconciler.wait_idle()

    async def unmount(self) -> None:
        """Release subscriptions and the poll timer."""
        await self._reconciler.stop()
        logfire.info("View unmounted", view=self.name)

    async def __aenter__(self):
        try:
            await self.mount()
        except BaseException:
            await self.unmount()
            raise
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.unmount()
