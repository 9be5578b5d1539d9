"""Vote domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from wall.domain.error import AuthenticationRequired
from wall.domain.model import Vote
from wall.domain.repository import VoteRepository
from wall.domain.value import FeedbackId, UserId, VoteAction, VoteId, VoteType

from .base import Service


def plan_vote(current: Optional[VoteType], desired: VoteType) -> VoteAction:
    """Decide which mutation a vote click maps to.

    Clicking the button matching the current vote retracts it, clicking the
    other one flips polarity, and clicking with no vote creates one.
    """
    if current is None:
        return VoteAction.CREATE
    if current == desired:
        return VoteAction.RETRACT
    return VoteAction.CHANGE


class VoteService(Service):
    """Domain service for vote operations."""

    def __init__(self, vote_repository: VoteRepository) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
        """
        self.vote_repository = vote_repository

    async def get_user_votes(self, user_id: UserId) -> dict[FeedbackId, VoteType]:
        """Map each feedback item the user voted on to the vote's polarity.

        Args:
            user_id: User ID

        Returns:
            Dictionary mapping feedback ID to vote type

        Raises:
            ProviderError: If the backend cannot be read
        """
        votes = await self.vote_repository.find_by_user(user_id)
        return {vote.feedback_id: vote.vote_type for vote in votes}

    async def cast_vote(
        self,
        feedback_id: FeedbackId,
        user_id: Optional[UserId],
        vote_type: VoteType,
    ) -> VoteAction:
        """Apply a vote click for a user.

        Does not touch any local view state. The change becomes visible once
        the backend reports it through a change notification.

        Args:
            feedback_id: Feedback ID
            user_id: Voting user, None when signed out
            vote_type: Polarity of the clicked button

        Returns:
            The mutation that was applied

        Raises:
            AuthenticationRequired: If no user is signed in
            ProviderError: If the backend rejects the mutation
        """
        if user_id is None:
            raise AuthenticationRequired("vote")

        with logfire.span(
            "cast_vote",
            feedback_id=str(feedback_id),
            user_id=user_id,
            vote_type=vote_type.value,
        ):
            existing = await self.vote_repository.find_by_user_and_feedback(
                user_id, feedback_id
            )
            action = plan_vote(existing.vote_type if existing else None, vote_type)

            if action is VoteAction.CREATE:
                vote = Vote(
                    id=VoteId(uuid4()),
                    feedback_id=feedback_id,
                    user_id=user_id,
                    vote_type=vote_type,
                    created_at=datetime.now(),
                )
                await self.vote_repository.save(vote)
            elif action is VoteAction.RETRACT:
                await self.vote_repository.delete_by_user_and_feedback(
                    user_id, feedback_id
                )
            else:
                await self.vote_repository.update_vote_type(
                    user_id, feedback_id, vote_type
                )

            logfire.info(
                "Vote applied",
                feedback_id=str(feedback_id),
                user_id=user_id,
                action=action.value,
            )
            return action
