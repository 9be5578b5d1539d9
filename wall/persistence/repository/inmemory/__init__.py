"""In-memory repository implementations for testing."""

from .feedback import InMemoryFeedbackRepository
from .store import InMemoryStore
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryFeedbackRepository",
    "InMemoryStore",
    "InMemoryVoteRepository",
]
