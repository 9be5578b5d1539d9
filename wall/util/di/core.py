"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from wall.config import ChartSettings, FeedbackSettings, RealtimeSettings, Settings
from wall.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_realtime_settings(self, settings: Settings) -> RealtimeSettings:
        """Provide live refresh settings."""
        return settings.realtime

    @provide(scope=Scope.APP)
    def provide_feedback_settings(self, settings: Settings) -> FeedbackSettings:
        """Provide feedback submission limits."""
        return settings.feedback

    @provide(scope=Scope.APP)
    def provide_chart_settings(self, settings: Settings) -> ChartSettings:
        """Provide chart settings."""
        return settings.chart
