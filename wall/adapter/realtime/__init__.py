"""Realtime change notifications."""

from .channel import DEFAULT_CHANNEL_MAXSIZE, NotificationChannel
from .feed import ChangeFeed, Subscription
from .inmemory import InMemoryChangeFeed, InMemorySubscription
from .postgres import PostgresChangeFeed, PostgresSubscription

__all__ = [
    "ChangeFeed",
    "DEFAULT_CHANNEL_MAXSIZE",
    "InMemoryChangeFeed",
    "InMemorySubscription",
    "NotificationChannel",
    "PostgresChangeFeed",
    "PostgresSubscription",
    "Subscription",
]
