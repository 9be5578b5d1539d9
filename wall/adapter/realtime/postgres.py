"""PostgreSQL change feed using LISTEN/NOTIFY.

Row triggers installed by the migrations call
``pg_notify('<table>_changes', '{"table": ..., "op": ...}')`` after every
insert, update and delete on the ``feedback`` and ``votes`` tables. Each
subscription holds its own asyncpg connection listening on that channel.
"""

import json
import logging

import asyncpg

from wall.adapter.error import SubscriptionError
from wall.adapter.realtime.channel import NotificationChannel
from wall.adapter.realtime.feed import ChangeFeed, Subscription
from wall.domain.value import ChangeEvent, ChangeNotification, Collection

logger = logging.getLogger(__name__)


def notify_channel_name(collection: Collection) -> str:
    """Postgres NOTIFY channel for a collection."""
    return f"{collection.value}_changes"


def parse_change_event(payload: str) -> ChangeEvent:
    """Extract the change kind from a trigger payload.

    Unknown or malformed payloads count as an update; the row data is never
    used, only the fact that something changed.
    """
    try:
        return ChangeEvent(str(json.loads(payload)["op"]).lower())
    except (ValueError, KeyError, TypeError):
        logger.warning("Unrecognised change payload: %r", payload)
        return ChangeEvent.UPDATE


class PostgresSubscription(Subscription):
    """LISTEN on a dedicated asyncpg connection."""

    def __init__(
        self,
        collection: Collection,
        channel: NotificationChannel,
        connection: asyncpg.Connection,
    ) -> None:
        super().__init__(collection, channel)
        self._connection = connection
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def _on_notify(
        self, connection: asyncpg.Connection, pid: int, channel: str, payload: str
    ) -> None:
        event = parse_change_event(payload)
        self.channel.publish(
            ChangeNotification(collection=self.collection, event=event)
        )

    def _on_terminate(self, connection: asyncpg.Connection) -> None:
        if not self._closed:
            # Polling keeps the view correct until the view is remounted
            logger.warning(
                "Realtime connection for %s lost", notify_channel_name(self.collection)
            )

    async def listen(self) -> None:
        self._connection.add_termination_listener(self._on_terminate)
        await self._connection.add_listener(
            notify_channel_name(self.collection), self._on_notify
        )

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        try:
            if not self._connection.is_closed():
                await self._connection.remove_listener(
                    notify_channel_name(self.collection), self._on_notify
                )
        finally:
            await self._connection.close()


class PostgresChangeFeed(ChangeFeed):
    """Change feed backed by Postgres LISTEN/NOTIFY."""

    def __init__(self, dsn: str) -> None:
        """Initialize change feed.

        Args:
            dsn: asyncpg connection string (no SQLAlchemy driver suffix)
        """
        self.dsn = dsn

    async def subscribe(
        self, collection: Collection, channel: NotificationChannel
    ) -> PostgresSubscription:
        """Open a LISTEN connection for a collection."""
        try:
            connection = await asyncpg.connect(self.dsn)
        except (OSError, asyncpg.PostgresError) as e:
            raise SubscriptionError(
                f"Cannot subscribe to {collection.value}: {e}"
            ) from e

        subscription = PostgresSubscription(collection, channel, connection)
        try:
            await subscription.listen()
        except BaseException as e:
            # Includes cancellation; the caller never sees this connection
            await connection.close()
            if isinstance(e, asyncpg.PostgresError):
                raise SubscriptionError(
                    f"Cannot listen on {notify_channel_name(collection)}: {e}"
                ) from e
            raise

        logger.info("Listening on %s", notify_channel_name(collection))
        return subscription
