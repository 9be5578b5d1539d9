"""Vote entity.

Votes are up or down. Each user can hold at most one vote per feedback item.
"""

from datetime import datetime

from pydantic import Field

from wall.domain.model.common import DomainModel
from wall.domain.value import FeedbackId, UserId, VoteId, VoteType


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per user per feedback item (enforced by the store's unique constraint)
    - Changing polarity updates the existing vote instead of adding a second one
    """

    id: VoteId
    feedback_id: FeedbackId
    user_id: UserId
    vote_type: VoteType
    created_at: datetime = Field(default_factory=datetime.now)
