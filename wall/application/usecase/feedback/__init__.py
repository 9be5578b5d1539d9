"""Feedback use cases."""

from .create_feedback import (
    CreateFeedbackRequest,
    CreateFeedbackResponse,
    CreateFeedbackUseCase,
)
from .list_feedback import ListFeedbackRequest, ListFeedbackUseCase
from .top_feedback import TopFeedbackRequest, TopFeedbackUseCase, truncate_label

__all__ = [
    "CreateFeedbackRequest",
    "CreateFeedbackResponse",
    "CreateFeedbackUseCase",
    "ListFeedbackRequest",
    "ListFeedbackUseCase",
    "TopFeedbackRequest",
    "TopFeedbackUseCase",
    "truncate_label",
]
