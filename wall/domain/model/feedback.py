"""Feedback entity and its vote-annotated read model."""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from wall.domain.model.common import DomainModel
from wall.domain.value import FeedbackId, UserId, VoteType


class Feedback(DomainModel):
    """A submitted feedback entry.

    Feedback is immutable once created; edits only happen outside this
    application.
    """

    id: FeedbackId
    title: str = Field(min_length=1)
    description: Optional[str] = None
    created_by: UserId
    created_at: datetime = Field(default_factory=datetime.now)


class FeedbackWithVotes(Feedback):
    """Feedback joined with its vote aggregate and the viewer's own vote.

    Business rules:
    - vote_count is the net count, upvotes minus downvotes
    - user_vote is None when the viewer has not voted (or is anonymous),
      which is distinct from a net count of zero
    """

    vote_count: int = 0
    upvotes: int = Field(default=0, ge=0)
    downvotes: int = Field(default=0, ge=0)
    user_vote: Optional[VoteType] = None

    @model_validator(mode="after")
    def validate_net_count(self) -> "FeedbackWithVotes":
        """Validate that the net count matches the vote breakdown."""
        if self.vote_count != self.upvotes - self.downvotes:
            raise ValueError(
                f"vote_count {self.vote_count} does not equal "
                f"upvotes {self.upvotes} minus downvotes {self.downvotes}"
            )
        return self
