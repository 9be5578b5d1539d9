"""Domain value objects for the feedback wall."""

from wall.domain.value.identifiers import FeedbackId, UserId, VoteId
from wall.domain.value.types import (
    ChangeEvent,
    ChangeNotification,
    Collection,
    VoteAction,
    VoteType,
)

__all__ = [
    # Identifiers
    "FeedbackId",
    "UserId",
    "VoteId",
    # Types
    "ChangeEvent",
    "ChangeNotification",
    "Collection",
    "VoteAction",
    "VoteType",
]
