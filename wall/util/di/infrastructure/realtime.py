"""Realtime infrastructure providers."""

from dishka import Scope, provide

from wall.adapter.realtime import ChangeFeed, PostgresChangeFeed
from wall.config import Settings
from wall.util.di.base import ProviderBase
from wall.util.error import ConfigurationError


class RealtimeProvider(ProviderBase):
    """Realtime component base.

    Notifications come from triggers on the real tables, so a real change
    feed only makes sense with real persistence.
    """

    __mock_component__ = "realtime"
    __depends_on__ = {"persistence"}


class ProdRealtimeProvider(RealtimeProvider):
    """Production realtime provider using Postgres LISTEN/NOTIFY."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_change_feed(self, settings: Settings) -> ChangeFeed:
        """Provide Postgres change feed.

        Raises:
            ConfigurationError: If the database is not PostgreSQL
        """
        if not settings.database_url.startswith("postgresql"):
            raise ConfigurationError(
                "Realtime notifications require a PostgreSQL database URL"
            )
        return PostgresChangeFeed(dsn=settings.asyncpg_dsn)
