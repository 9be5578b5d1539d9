"""Live ranked feedback list for one viewer."""

from typing import Callable, Optional

import logfire

from wall.adapter.realtime import ChangeFeed
from wall.application.usecase.feedback import (
    CreateFeedbackRequest,
    CreateFeedbackResponse,
    CreateFeedbackUseCase,
    ListFeedbackRequest,
    ListFeedbackUseCase,
)
from wall.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
)
from wall.config import RealtimeSettings
from wall.domain.error import AuthenticationRequired
from wall.domain.model import FeedbackSnapshot
from wall.domain.value import FeedbackId, UserId, VoteType

from .base import LiveView
from .reconciler import ReconcilerState


class FeedbackView(LiveView[FeedbackSnapshot]):
    """Feedback ranked by net votes, annotated with the viewer's own votes.

    Votes and submissions do not touch the snapshot. They show up once the
    backend reports the change and the reconciler refreshes, exactly like
    changes made by anyone else.
    """

    name = "feedback_list"

    def __init__(
        self,
        list_feedback: ListFeedbackUseCase,
        cast_vote: CastVoteUseCase,
        create_feedback: CreateFeedbackUseCase,
        change_feed: ChangeFeed,
        settings: RealtimeSettings,
        voter: Optional[UserId] = None,
        on_change: Optional[Callable[[FeedbackSnapshot], None]] = None,
        on_auth_required: Optional[Callable[[], None]] = None,
    ) -> None:
        """Initialize feedback view.

        Args:
            list_feedback: Fetch and rank use case
            cast_vote: Vote toggle use case
            create_feedback: Feedback submission use case
            change_feed: Source of change notifications
            settings: Realtime settings
            voter: Signed-in user, None when anonymous
            on_change: Called with every new snapshot
            on_auth_required: Called when an action needs a signed-in user
        """
        super().__init__(change_feed, settings, on_change=on_change)
        self.list_feedback = list_feedback
        self.cast_vote = cast_vote
        self.create_feedback = create_feedback
        self.on_auth_required = on_auth_required
        self._voter = voter

    @property
    def voter(self) -> Optional[UserId]:
        return self._voter

    async def load(self) -> FeedbackSnapshot:
        return await self.list_feedback.execute(
            ListFeedbackRequest(user_id=self._voter)
        )

    async def set_voter(self, voter: Optional[UserId]) -> None:
        """Switch the signed-in user (sign in, sign out, account change).

        Reloads when mounted so user_vote annotations follow the new user.
        """
        if voter == self._voter:
            return
        self._voter = voter
        if self.state is ReconcilerState.SUBSCRIBED:
            await self.reconciler.request_refresh("voter")

    async def vote(
        self, feedback_id: FeedbackId, vote_type: VoteType
    ) -> Optional[CastVoteResponse]:
        """Toggle the viewer's vote on a feedback item.

        Returns:
            The applied mutation, or None if the viewer must sign in first

        Raises:
            ProviderError: If the backend rejects the mutation
        """
        try:
            return await self.cast_vote.execute(
                CastVoteRequest(
                    feedback_id=str(feedback_id),
                    vote_type=vote_type,
                    user_id=self._voter,
                )
            )
        except AuthenticationRequired as e:
            self._require_auth(e)
            return None

    async def submit(
        self, title: str, description: Optional[str] = None
    ) -> Optional[CreateFeedbackResponse]:
        """Submit new feedback as the viewer.

        Returns:
            The stored feedback, or None if the viewer must sign in first

        Raises:
            ValidationError: If title or description are invalid
            ProviderError: If the backend rejects the write
        """
        try:
            return await self.create_feedback.execute(
                CreateFeedbackRequest(
                    title=title, description=description, user_id=self._voter
                )
            )
        except AuthenticationRequired as e:
            self._require_auth(e)
            return None

    def _require_auth(self, signal: AuthenticationRequired) -> None:
        logfire.info("Sign in required", view=self.name, action=signal.action)
        if self.on_auth_required is not None:
            self.on_auth_required()
