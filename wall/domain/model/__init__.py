"""Domain model entities for the feedback wall."""

from wall.domain.model.feedback import Feedback, FeedbackWithVotes
from wall.domain.model.snapshot import ChartBar, FeedbackSnapshot, VoteChartSnapshot
from wall.domain.model.vote import Vote

__all__ = [
    "Feedback",
    "FeedbackWithVotes",
    "Vote",
    "FeedbackSnapshot",
    "ChartBar",
    "VoteChartSnapshot",
]
