"""Live views kept in sync with backend change notifications."""

from .base import LiveView
from .chart_view import VoteChartView
from .feedback_view import FeedbackView
from .reconciler import WATCHED_COLLECTIONS, Reconciler, ReconcilerState

__all__ = [
    "FeedbackView",
    "LiveView",
    "Reconciler",
    "ReconcilerState",
    "VoteChartView",
    "WATCHED_COLLECTIONS",
]
