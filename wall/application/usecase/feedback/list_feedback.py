"""List feedback use case."""

from typing import Optional

from pydantic import BaseModel

from wall.application.usecase.base import BaseUseCase
from wall.domain.error import FetchError
from wall.domain.model import FeedbackSnapshot
from wall.domain.service import FeedbackService, rank_feedback
from wall.domain.value import UserId


class ListFeedbackRequest(BaseModel):
    """List feedback request."""

    user_id: Optional[str] = None  # Viewer from the auth provider, None if anonymous


class ListFeedbackUseCase(BaseUseCase[ListFeedbackRequest, FeedbackSnapshot]):
    """Use case for building the ranked feedback list for one viewer."""

    def __init__(self, feedback_service: FeedbackService) -> None:
        """Initialize list feedback use case.

        Args:
            feedback_service: Feedback domain service
        """
        self.feedback_service = feedback_service

    async def execute(self, request: ListFeedbackRequest) -> FeedbackSnapshot:
        """Fetch, annotate and rank feedback.

        A failed fetch yields an empty snapshot carrying the error rather
        than raising, so the view shows an error state instead of stale data.

        Args:
            request: List feedback request

        Returns:
            New immutable snapshot
        """
        user_id = UserId(request.user_id) if request.user_id is not None else None
        try:
            items = await self.feedback_service.fetch(user_id)
        except FetchError as e:
            return FeedbackSnapshot.failed(str(e))
        return FeedbackSnapshot(items=tuple(rank_feedback(items)))
