"""Cast vote use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from wall.application.usecase.base import BaseUseCase
from wall.domain.service import VoteService
from wall.domain.value import FeedbackId, UserId, VoteAction, VoteType


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    feedback_id: str  # UUID string
    vote_type: VoteType  # Button that was clicked
    user_id: Optional[str] = None  # Signed-in user, None if anonymous


class CastVoteResponse(BaseModel):
    """Cast vote response."""

    feedback_id: str
    action: VoteAction
    vote_type: Optional[VoteType]  # Resulting vote, None after a retraction


class CastVoteUseCase(BaseUseCase[CastVoteRequest, CastVoteResponse]):
    """Use case for toggling a vote on a feedback item."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute vote toggle.

        Args:
            request: Cast vote request

        Returns:
            Which mutation was applied

        Raises:
            AuthenticationRequired: If no user is signed in
            ProviderError: If the backend rejects the mutation
        """
        feedback_id = FeedbackId(UUID(request.feedback_id))
        user_id = UserId(request.user_id) if request.user_id is not None else None

        action = await self.vote_service.cast_vote(
            feedback_id, user_id, request.vote_type
        )

        return CastVoteResponse(
            feedback_id=str(feedback_id),
            action=action,
            vote_type=None if action is VoteAction.RETRACT else request.vote_type,
        )
