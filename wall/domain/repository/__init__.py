"""Repository interfaces for the feedback wall domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from wall.domain.repository.feedback import FeedbackRepository
from wall.domain.repository.vote import VoteRepository

__all__ = [
    "FeedbackRepository",
    "VoteRepository",
]
