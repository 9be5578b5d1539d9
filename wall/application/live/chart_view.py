"""Live top feedback chart."""

from typing import Callable, Optional

from wall.adapter.realtime import ChangeFeed
from wall.application.usecase.feedback import TopFeedbackRequest, TopFeedbackUseCase
from wall.config import RealtimeSettings
from wall.domain.model import VoteChartSnapshot

from .base import LiveView


class VoteChartView(LiveView[VoteChartSnapshot]):
    """Bars for the highest voted feedback, refreshed on every change."""

    name = "vote_chart"

    def __init__(
        self,
        top_feedback: TopFeedbackUseCase,
        change_feed: ChangeFeed,
        settings: RealtimeSettings,
        limit: Optional[int] = None,
        on_change: Optional[Callable[[VoteChartSnapshot], None]] = None,
    ) -> None:
        super().__init__(change_feed, settings, on_change=on_change)
        self.top_feedback = top_feedback
        self.limit = limit

    async def load(self) -> VoteChartSnapshot:
        return await self.top_feedback.execute(TopFeedbackRequest(limit=self.limit))
