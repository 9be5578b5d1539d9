"""PostgreSQL implementation of Feedback repository."""

from typing import List, Optional

from sqlalchemy import desc, insert, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from wall.domain.model import Feedback, FeedbackWithVotes
from wall.domain.repository import FeedbackRepository
from wall.domain.value import FeedbackId
from wall.persistence.database import transaction
from wall.persistence.mappers import (
    feedback_to_dict,
    row_to_feedback,
    row_to_feedback_with_votes,
)
from wall.persistence.tables import feedback_table, feedback_with_votes_view


class PostgresFeedbackRepository(FeedbackRepository):
    """PostgreSQL implementation of FeedbackRepository."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """Initialize repository with a session factory.

        Args:
            session_factory: SQLAlchemy async session factory
        """
        self.session_factory = session_factory

    async def find_by_id(self, feedback_id: FeedbackId) -> Optional[Feedback]:
        """Find a feedback item by ID."""
        stmt = select(feedback_table).where(feedback_table.c.id == feedback_id)
        async with transaction(self.session_factory) as session:
            result = await session.execute(stmt)
            row = result.fetchone()
        return row_to_feedback(row._asdict()) if row else None

    async def find_all_with_votes(
        self, limit: Optional[int] = None
    ) -> List[FeedbackWithVotes]:
        """Read the feedback_with_votes view, highest net count first."""
        stmt = select(feedback_with_votes_view).order_by(
            desc(feedback_with_votes_view.c.vote_count)
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        async with transaction(self.session_factory) as session:
            result = await session.execute(stmt)
            rows = result.fetchall()
        return [row_to_feedback_with_votes(row._asdict()) for row in rows]

    async def save(self, feedback: Feedback) -> Feedback:
        """Insert a feedback item and return it as stored."""
        stmt = (
            insert(feedback_table)
            .values(**feedback_to_dict(feedback))
            .returning(feedback_table)
        )
        async with transaction(self.session_factory) as session:
            result = await session.execute(stmt)
            row = result.fetchone()
        return row_to_feedback(row._asdict())
