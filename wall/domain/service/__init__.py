"""Domain services."""

from .base import Service
from .feedback_service import FeedbackService
from .ranking import rank_feedback, ranking_key
from .vote_service import VoteService, plan_vote

__all__ = [
    "FeedbackService",
    "Service",
    "VoteService",
    "plan_vote",
    "rank_feedback",
    "ranking_key",
]
