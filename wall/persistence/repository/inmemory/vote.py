"""In-memory vote repository for testing."""

from typing import Optional

from wall.adapter.error import ProviderError
from wall.domain.model import Vote
from wall.domain.repository import VoteRepository
from wall.domain.value import ChangeEvent, Collection, FeedbackId, UserId, VoteType

from .store import InMemoryStore


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    def _index(self, user_id: UserId, feedback_id: FeedbackId) -> Optional[int]:
        for i, vote in enumerate(self.store.votes):
            if vote.user_id == user_id and vote.feedback_id == feedback_id:
                return i
        return None

    async def find_by_user(self, user_id: UserId) -> list[Vote]:
        """Find all votes by a user."""
        self.store.record("find_by_user")
        return [v for v in self.store.votes if v.user_id == user_id]

    async def find_by_user_and_feedback(
        self, user_id: UserId, feedback_id: FeedbackId
    ) -> Optional[Vote]:
        """Find a vote by user and feedback item."""
        self.store.record("find_by_user_and_feedback")
        index = self._index(user_id, feedback_id)
        return self.store.votes[index] if index is not None else None

    async def save(self, vote: Vote) -> Vote:
        """Save a vote.

        Raises:
            ProviderError: If the feedback item is unknown or the vote already
                exists, matching the database constraints
        """
        self.store.record("save_vote")
        if vote.feedback_id not in self.store.feedback:
            raise ProviderError(
                'insert or update on table "votes" violates foreign key constraint'
            )
        if self._index(vote.user_id, vote.feedback_id) is not None:
            raise ProviderError(
                'duplicate key value violates unique constraint "unique_vote"'
            )
        self.store.votes.append(vote)
        self.store.emit(Collection.VOTES, ChangeEvent.INSERT)
        return vote

    async def update_vote_type(
        self, user_id: UserId, feedback_id: FeedbackId, vote_type: VoteType
    ) -> bool:
        """Change the polarity of a vote."""
        self.store.record("update_vote_type")
        index = self._index(user_id, feedback_id)
        if index is None:
            return False
        vote = self.store.votes[index]
        self.store.votes[index] = vote.model_copy(update={"vote_type": vote_type})
        self.store.emit(Collection.VOTES, ChangeEvent.UPDATE)
        return True

    async def delete_by_user_and_feedback(
        self, user_id: UserId, feedback_id: FeedbackId
    ) -> bool:
        """Delete a vote by user and feedback item."""
        self.store.record("delete_vote")
        index = self._index(user_id, feedback_id)
        if index is None:
            return False
        self.store.votes.pop(index)
        self.store.emit(Collection.VOTES, ChangeEvent.DELETE)
        return True
