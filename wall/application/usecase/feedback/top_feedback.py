"""Top feedback chart use case."""

from typing import Optional

from pydantic import BaseModel

from wall.application.usecase.base import BaseUseCase
from wall.config import ChartSettings
from wall.domain.error import FetchError
from wall.domain.model import ChartBar, FeedbackWithVotes, VoteChartSnapshot
from wall.domain.service import FeedbackService, rank_feedback


class TopFeedbackRequest(BaseModel):
    """Top feedback request."""

    limit: Optional[int] = None  # Defaults to the configured chart size


def truncate_label(title: str, length: int) -> str:
    """Shorten a title for an axis label."""
    return title if len(title) <= length else title[:length] + "..."


class TopFeedbackUseCase(BaseUseCase[TopFeedbackRequest, VoteChartSnapshot]):
    """Use case for the top-N feedback chart."""

    def __init__(
        self, feedback_service: FeedbackService, settings: ChartSettings
    ) -> None:
        """Initialize top feedback use case.

        Args:
            feedback_service: Feedback domain service
            settings: Chart settings
        """
        self.feedback_service = feedback_service
        self.settings = settings

    def _to_bar(self, item: FeedbackWithVotes) -> ChartBar:
        return ChartBar(
            feedback_id=item.id,
            label=truncate_label(item.title, self.settings.label_length),
            full_title=item.title,
            votes=max(0, item.vote_count),
            upvotes=item.upvotes,
            downvotes=item.downvotes,
        )

    async def execute(self, request: TopFeedbackRequest) -> VoteChartSnapshot:
        """Build chart bars for the highest voted feedback.

        Args:
            request: Top feedback request

        Returns:
            New chart snapshot, empty with an error if the fetch failed
        """
        limit = request.limit or self.settings.limit
        try:
            items = await self.feedback_service.fetch(user_id=None, limit=limit)
        except FetchError as e:
            return VoteChartSnapshot.failed(str(e))
        return VoteChartSnapshot(
            bars=tuple(self._to_bar(item) for item in rank_feedback(items))
        )
