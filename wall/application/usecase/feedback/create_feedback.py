"""Create feedback use case."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from wall.application.usecase.base import BaseUseCase
from wall.domain.service import FeedbackService
from wall.domain.value import UserId


class CreateFeedbackRequest(BaseModel):
    """Create feedback request."""

    title: str
    description: Optional[str] = None
    user_id: Optional[str] = None  # Signed-in user, None if anonymous


class CreateFeedbackResponse(BaseModel):
    """Create feedback response."""

    feedback_id: str
    title: str
    description: Optional[str]
    created_by: str
    created_at: datetime


class CreateFeedbackUseCase(
    BaseUseCase[CreateFeedbackRequest, CreateFeedbackResponse]
):
    """Use case for submitting a feedback item."""

    def __init__(self, feedback_service: FeedbackService) -> None:
        """Initialize create feedback use case.

        Args:
            feedback_service: Feedback domain service
        """
        self.feedback_service = feedback_service

    async def execute(self, request: CreateFeedbackRequest) -> CreateFeedbackResponse:
        """Execute feedback submission.

        Args:
            request: Create feedback request

        Returns:
            Details of the stored feedback item

        Raises:
            AuthenticationRequired: If no user is signed in
            ValidationError: If title or description are invalid
            ProviderError: If the backend rejects the write
        """
        user_id = UserId(request.user_id) if request.user_id is not None else None
        feedback = await self.feedback_service.create_feedback(
            user_id=user_id,
            title=request.title,
            description=request.description,
        )
        return CreateFeedbackResponse(
            feedback_id=str(feedback.id),
            title=feedback.title,
            description=feedback.description,
            created_by=feedback.created_by,
            created_at=feedback.created_at,
        )
