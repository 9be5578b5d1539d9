"""PostgreSQL implementation of Vote repository."""

from typing import List, Optional

from sqlalchemy import and_, delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from wall.domain.model import Vote
from wall.domain.repository import VoteRepository
from wall.domain.value import FeedbackId, UserId, VoteType
from wall.persistence.database import transaction
from wall.persistence.mappers import row_to_vote, vote_to_dict
from wall.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """Initialize repository with a session factory.

        Args:
            session_factory: SQLAlchemy async session factory
        """
        self.session_factory = session_factory

    def _pair(self, user_id: UserId, feedback_id: FeedbackId):
        return and_(
            votes_table.c.user_id == user_id,
            votes_table.c.feedback_id == feedback_id,
        )

    async def find_by_user(self, user_id: UserId) -> List[Vote]:
        """Find all votes by a user."""
        stmt = select(votes_table).where(votes_table.c.user_id == user_id)
        async with transaction(self.session_factory) as session:
            result = await session.execute(stmt)
            rows = result.fetchall()
        return [row_to_vote(row._asdict()) for row in rows]

    async def find_by_user_and_feedback(
        self, user_id: UserId, feedback_id: FeedbackId
    ) -> Optional[Vote]:
        """Find a user's vote on a specific feedback item."""
        stmt = select(votes_table).where(self._pair(user_id, feedback_id))
        async with transaction(self.session_factory) as session:
            result = await session.execute(stmt)
            row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def save(self, vote: Vote) -> Vote:
        """Insert a vote (unique per user/feedback pair)."""
        stmt = insert(votes_table).values(**vote_to_dict(vote)).returning(votes_table)
        async with transaction(self.session_factory) as session:
            result = await session.execute(stmt)
            row = result.fetchone()
        return row_to_vote(row._asdict())

    async def update_vote_type(
        self, user_id: UserId, feedback_id: FeedbackId, vote_type: VoteType
    ) -> bool:
        """Change the polarity of an existing vote."""
        stmt = (
            update(votes_table)
            .where(self._pair(user_id, feedback_id))
            .values(vote_type=vote_type.value)
        )
        async with transaction(self.session_factory) as session:
            result = await session.execute(stmt)
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def delete_by_user_and_feedback(
        self, user_id: UserId, feedback_id: FeedbackId
    ) -> bool:
        """Delete a user's vote on a feedback item."""
        stmt = delete(votes_table).where(self._pair(user_id, feedback_id))
        async with transaction(self.session_factory) as session:
            result = await session.execute(stmt)
        return result.rowcount > 0  # type: ignore[attr-defined]
