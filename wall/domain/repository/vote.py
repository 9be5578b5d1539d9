"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from wall.domain.model import Vote
from wall.domain.value import FeedbackId, UserId, VoteType


class VoteRepository(ABC):
    """Repository for Vote entity.

    Every write is a single atomic call keyed by (feedback, user).
    """

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> List[Vote]:
        """Find all votes by a user across all feedback items.

        Args:
            user_id: The user's ID

        Returns:
            List of votes by the user
        """
        pass

    @abstractmethod
    async def find_by_user_and_feedback(
        self, user_id: UserId, feedback_id: FeedbackId
    ) -> Optional[Vote]:
        """Find a user's vote on a specific feedback item.

        Args:
            user_id: The user's ID
            feedback_id: ID of the feedback item

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Save a vote (create).

        Args:
            vote: The vote to save

        Returns:
            The saved vote

        Raises:
            ProviderError: If a vote already exists for this user/feedback pair
                or the backend rejects the write
        """
        pass

    @abstractmethod
    async def update_vote_type(
        self, user_id: UserId, feedback_id: FeedbackId, vote_type: VoteType
    ) -> bool:
        """Change the polarity of an existing vote.

        Args:
            user_id: The user's ID
            feedback_id: ID of the feedback item
            vote_type: New polarity

        Returns:
            True if a vote was updated, False if no vote existed
        """
        pass

    @abstractmethod
    async def delete_by_user_and_feedback(
        self, user_id: UserId, feedback_id: FeedbackId
    ) -> bool:
        """Delete a user's vote on a feedback item.

        Args:
            user_id: The user's ID
            feedback_id: ID of the feedback item

        Returns:
            True if a vote was deleted, False if no vote existed
        """
        pass
