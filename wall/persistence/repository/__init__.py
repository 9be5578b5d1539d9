"""PostgreSQL repository implementations."""

from wall.persistence.repository.feedback import PostgresFeedbackRepository
from wall.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresFeedbackRepository",
    "PostgresVoteRepository",
]
