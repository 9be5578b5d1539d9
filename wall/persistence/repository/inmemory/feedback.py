"""In-memory feedback repository for testing."""

from typing import Optional

from wall.adapter.error import ProviderError
from wall.domain.model import Feedback, FeedbackWithVotes
from wall.domain.repository import FeedbackRepository
from wall.domain.value import ChangeEvent, Collection, FeedbackId, VoteType

from .store import InMemoryStore


class InMemoryFeedbackRepository(FeedbackRepository):
    """In-memory implementation of FeedbackRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def find_by_id(self, feedback_id: FeedbackId) -> Optional[Feedback]:
        """Find a feedback item by ID."""
        self.store.record("find_by_id")
        return self.store.feedback.get(feedback_id)

    async def find_all_with_votes(
        self, limit: Optional[int] = None
    ) -> list[FeedbackWithVotes]:
        """Aggregate votes per feedback item, highest net count first."""
        self.store.record("find_all_with_votes")

        net: dict[FeedbackId, int] = {}
        upvotes: dict[FeedbackId, int] = {}
        downvotes: dict[FeedbackId, int] = {}
        for vote in self.store.votes:
            net[vote.feedback_id] = net.get(vote.feedback_id, 0) + vote.vote_type.weight
            counts = upvotes if vote.vote_type is VoteType.UP else downvotes
            counts[vote.feedback_id] = counts.get(vote.feedback_id, 0) + 1

        rows = [
            FeedbackWithVotes(
                **feedback.model_dump(),
                vote_count=net.get(feedback.id, 0),
                upvotes=upvotes.get(feedback.id, 0),
                downvotes=downvotes.get(feedback.id, 0),
            )
            for feedback in self.store.feedback.values()
        ]
        # Same server-side ordering as the database view query
        rows.sort(key=lambda row: row.vote_count, reverse=True)

        if limit is not None:
            rows = rows[:limit]
        return rows

    async def save(self, feedback: Feedback) -> Feedback:
        """Save a feedback item."""
        self.store.record("save_feedback")
        if feedback.id in self.store.feedback:
            raise ProviderError(
                f"duplicate key value violates unique constraint: {feedback.id}"
            )
        self.store.feedback[feedback.id] = feedback
        self.store.emit(Collection.FEEDBACK, ChangeEvent.INSERT)
        return feedback
