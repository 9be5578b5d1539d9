"""Immutable read-side snapshots rendered by live views.

A snapshot is built from scratch on every refresh and replaces the previous
one wholesale.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from wall.domain.model.common import DomainModel
from wall.domain.model.feedback import FeedbackWithVotes
from wall.domain.value import FeedbackId, VoteType


class FeedbackSnapshot(DomainModel):
    """Ranked feedback list as seen by one viewer at one point in time."""

    items: tuple[FeedbackWithVotes, ...] = ()
    error: Optional[str] = None
    fetched_at: datetime = Field(default_factory=datetime.now)

    @classmethod
    def failed(cls, error: str) -> "FeedbackSnapshot":
        """Snapshot for a fetch that could not load the feedback list."""
        return cls(items=(), error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def get(self, feedback_id: FeedbackId) -> Optional[FeedbackWithVotes]:
        for item in self.items:
            if item.id == feedback_id:
                return item
        return None

    def user_vote(self, feedback_id: FeedbackId) -> Optional[VoteType]:
        """Viewer's vote on an item, None if no vote or item unknown."""
        item = self.get(feedback_id)
        return item.user_vote if item else None


class ChartBar(DomainModel):
    """One bar of the top feedback chart."""

    feedback_id: FeedbackId
    label: str
    full_title: str
    votes: int = Field(ge=0)  # Net count clamped at zero
    upvotes: int = Field(ge=0)
    downvotes: int = Field(ge=0)


class VoteChartSnapshot(DomainModel):
    """Top feedback chart data."""

    bars: tuple[ChartBar, ...] = ()
    error: Optional[str] = None
    fetched_at: datetime = Field(default_factory=datetime.now)

    @classmethod
    def failed(cls, error: str) -> "VoteChartSnapshot":
        return cls(bars=(), error=error)

    @property
    def ok(self) -> bool:
        return self.error is None
