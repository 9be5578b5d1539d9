"""Feedback repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from wall.domain.model import Feedback, FeedbackWithVotes
from wall.domain.value import FeedbackId


class FeedbackRepository(ABC):
    """Repository for Feedback entity.

    Defines the contract for feedback persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, feedback_id: FeedbackId) -> Optional[Feedback]:
        """Find a feedback item by ID.

        Args:
            feedback_id: The feedback item's unique identifier

        Returns:
            The feedback item if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all_with_votes(
        self, limit: Optional[int] = None
    ) -> List[FeedbackWithVotes]:
        """Read the pre-aggregated feedback view.

        Rows come back ordered by net vote count, highest first. The
        user_vote field is never populated here.

        Args:
            limit: Maximum number of rows, None for all

        Returns:
            Feedback items with their vote aggregates

        Raises:
            ProviderError: If the backend cannot be read
        """
        pass

    @abstractmethod
    async def save(self, feedback: Feedback) -> Feedback:
        """Save a new feedback item.

        Args:
            feedback: The feedback item to save

        Returns:
            The saved feedback item

        Raises:
            ProviderError: If the backend rejects the write
        """
        pass
