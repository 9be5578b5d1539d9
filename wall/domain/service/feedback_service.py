"""Feedback domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from wall.adapter.error import ProviderError
from wall.config import FeedbackSettings
from wall.domain.error import (
    AuthenticationRequired,
    FetchError,
    NotFoundError,
    ValidationError,
)
from wall.domain.model import Feedback, FeedbackWithVotes
from wall.domain.repository import FeedbackRepository
from wall.domain.value import FeedbackId, UserId, VoteType

from .base import Service
from .vote_service import VoteService


class FeedbackService(Service):
    """Domain service for feedback operations."""

    def __init__(
        self,
        feedback_repository: FeedbackRepository,
        vote_service: VoteService,
        settings: FeedbackSettings,
    ) -> None:
        """Initialize feedback service.

        Args:
            feedback_repository: Feedback repository
            vote_service: Vote domain service
            settings: Submission limits
        """
        self.feedback_repository = feedback_repository
        self.vote_service = vote_service
        self.settings = settings

    async def fetch(
        self, user_id: Optional[UserId], limit: Optional[int] = None
    ) -> list[FeedbackWithVotes]:
        """Load feedback with vote totals, annotated with the user's own votes.

        The user's votes are best-effort: if they cannot be read, items are
        returned without annotation instead of failing the whole fetch.

        Args:
            user_id: Viewing user, None when anonymous
            limit: Maximum number of items

        Returns:
            Annotated feedback items, in no particular order

        Raises:
            FetchError: If the feedback view cannot be read
        """
        with logfire.span("fetch_feedback", user_id=user_id, limit=limit):
            try:
                rows = await self.feedback_repository.find_all_with_votes(limit=limit)
            except ProviderError as e:
                logfire.error("Error fetching feedback", error=str(e))
                raise FetchError(str(e)) from e

            user_votes: dict[FeedbackId, VoteType] = {}
            if user_id is not None:
                try:
                    user_votes = await self.vote_service.get_user_votes(user_id)
                except ProviderError as e:
                    logfire.warn(
                        "User votes unavailable, showing feedback without them",
                        user_id=user_id,
                        error=str(e),
                    )

            return [
                row.model_copy(update={"user_vote": user_votes.get(row.id)})
                for row in rows
            ]

    async def get_feedback(self, feedback_id: FeedbackId) -> Feedback:
        """Get a single feedback item.

        Raises:
            NotFoundError: If no such feedback item exists
        """
        feedback = await self.feedback_repository.find_by_id(feedback_id)
        if feedback is None:
            raise NotFoundError("Feedback", str(feedback_id))
        return feedback

    async def create_feedback(
        self,
        user_id: Optional[UserId],
        title: str,
        description: Optional[str] = None,
    ) -> Feedback:
        """Submit a new feedback item.

        Args:
            user_id: Submitting user, None when signed out
            title: Title, surrounding whitespace is stripped
            description: Optional description, blank means none

        Returns:
            Saved feedback item

        Raises:
            AuthenticationRequired: If no user is signed in
            ValidationError: If title or description are invalid
            ProviderError: If the backend rejects the write
        """
        if user_id is None:
            raise AuthenticationRequired("submit feedback")

        title = title.strip()
        if not title:
            raise ValidationError("Title is required")
        if len(title) > self.settings.title_max_length:
            raise ValidationError(
                f"Title must be at most {self.settings.title_max_length} characters"
            )

        cleaned_description = (description or "").strip() or None
        if (
            cleaned_description is not None
            and len(cleaned_description) > self.settings.description_max_length
        ):
            raise ValidationError(
                "Description must be at most "
                f"{self.settings.description_max_length} characters"
            )

        with logfire.span("create_feedback", user_id=user_id):
            feedback = Feedback(
                id=FeedbackId(uuid4()),
                title=title,
                description=cleaned_description,
                created_by=user_id,
                created_at=datetime.now(),
            )
            saved = await self.feedback_repository.save(feedback)
            logfire.info("Feedback created", feedback_id=str(saved.id), user_id=user_id)
            return saved
